#!/usr/bin/env python3
"""In-memory local clipboard store.

This module provides LocalClipboard, the collaborator on the guest side of
the bridge. Local changes are reported through on_change. Host updates are
applied with apply_remote, which never reports a change, so host text is
never pushed back to the host.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class LocalClipboard:
    """Local clipboard content shared by the bridge and local writers.

    Safe to use from several threads; on_change is called outside the
    internal lock.

    Attributes:
        on_change: Callable told about local changes, usually
            ClipboardBridge.on_local_clipboard_changed.
    """

    def __init__(self, on_change: Callable[[str], object] | None = None) -> None:
        self.on_change = on_change
        self._content = ""
        self._lock = threading.Lock()

    @property
    def content(self) -> str:
        """Current clipboard text."""
        with self._lock:
            return self._content

    def set_text(self, text: str) -> None:
        """Replace the content as a local user change and report it.

        Every call is reported, even when the text is unchanged.
        """
        with self._lock:
            self._content = text
        if self.on_change is not None:
            self.on_change(text)

    def apply_remote(self, text: str) -> None:
        """Replace the content with text received from the host."""
        with self._lock:
            self._content = text
        logger.debug("Applied %d characters from host", len(text))
