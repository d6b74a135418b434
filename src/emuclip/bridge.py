#!/usr/bin/env python3
"""Bidirectional clipboard bridge between guest and host.

This module provides ClipboardBridge, which wires the channel, the
receive loop and the send operation together. The local clipboard store
reports changes through on_local_clipboard_changed and receives host
updates through the sink given at construction.

The bridge does not suppress echoes: the sink must apply host text
without reporting it back as a local change. See local_clipboard.py.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from typing import Callable

from emuclip.bridge_config import BridgeConfig
from emuclip.channel import ChannelHandle
from emuclip.receive_loop import run_receive_loop
from emuclip.send import send_clipboard_text

logger = logging.getLogger(__name__)


class ClipboardBridge:
    """Keep the local clipboard and the host clipboard in sync.

    Args:
        sink: Callable applying host text to the local clipboard.
        config: Bridge settings; defaults reach the host over vsock.
        channel: Channel handle to use; one is created from config if None.
    """

    def __init__(
        self,
        sink: Callable[[str], object],
        config: BridgeConfig | None = None,
        channel: ChannelHandle | None = None,
    ) -> None:
        self._sink = sink
        self._config = config or BridgeConfig()
        self._channel = channel or ChannelHandle(self._config)
        self._stop_requested = asyncio.Event()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._receive_task: asyncio.Task[None] | None = None
        self._send_tasks: set[asyncio.Task[bool]] = set()
        self._closed = False

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, receive loop starts on start()")
        else:
            self.start()

    @property
    def channel(self) -> ChannelHandle:
        """The channel handle owning the host connection."""
        return self._channel

    def start(self) -> None:
        """Start the receive loop on the running event loop.

        A bridge built inside a running event loop starts itself; calling
        start() on a running bridge does nothing.
        """
        if self._receive_task is not None:
            return
        self._loop = asyncio.get_running_loop()
        self._receive_task = self._loop.create_task(
            run_receive_loop(
                self._channel,
                self._sink,
                self._stop_requested,
                log_clipboard_access=self._config.log_clipboard_access,
                max_frame_size=self._config.max_frame_size,
            ),
            name="emuclip-receive",
        )

    def on_local_clipboard_changed(self, text: str | None) -> None:
        """Push new local clipboard text to the host in the background.

        Never blocks and may be called from any thread. A cleared
        clipboard (None) is pushed as empty text. Changes reported before
        the bridge is started are dropped.
        """
        if self._loop is None:
            logger.debug("Bridge not started, dropping clipboard update")
            return
        if self._closed:
            logger.debug("Bridge closed, dropping clipboard update")
            return
        value = "" if text is None else text
        try:
            self._loop.call_soon_threadsafe(self._spawn_send, value)
        except RuntimeError:
            # Event loop already closed during shutdown
            logger.debug("Event loop closed, dropping clipboard update")

    def _spawn_send(self, text: str) -> None:
        if self._closed:
            return
        task = asyncio.create_task(
            send_clipboard_text(
                self._channel,
                text,
                log_clipboard_access=self._config.log_clipboard_access,
            )
        )
        self._send_tasks.add(task)
        task.add_done_callback(self._send_tasks.discard)

    async def drain_sends(self) -> None:
        """Wait until every send spawned so far has finished."""
        # Let callbacks queued by on_local_clipboard_changed spawn their tasks
        await asyncio.sleep(0)
        while pending := [task for task in self._send_tasks if not task.done()]:
            await asyncio.gather(*pending, return_exceptions=True)

    async def close(self) -> None:
        """Stop the receive loop, abandon in-flight sends, drop the channel."""
        if self._closed:
            return
        self._closed = True
        self._stop_requested.set()

        if self._receive_task is not None:
            self._receive_task.cancel()
            with suppress(asyncio.CancelledError):
                await self._receive_task

        for task in self._send_tasks:
            task.cancel()
        await asyncio.gather(*self._send_tasks, return_exceptions=True)

        self._channel.clear()
        logger.debug("Clipboard bridge closed")

    async def __aenter__(self) -> ClipboardBridge:
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
