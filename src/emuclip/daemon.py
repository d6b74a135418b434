#!/usr/bin/env python3
"""Daemon mode implementation for emuclip.

This module runs the clipboard bridge until SIGINT or SIGTERM. Host
updates are applied to an in-memory LocalClipboard and printed to stdout,
one line per update. With stdin forwarding enabled, every line read from
stdin is treated as a local clipboard change and pushed to the host.
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
import threading
from typing import TYPE_CHECKING, TextIO

import click

from emuclip.bridge import ClipboardBridge
from emuclip.local_clipboard import LocalClipboard

if TYPE_CHECKING:
    from emuclip.bridge_config import BridgeConfig

logger = logging.getLogger(__name__)


def start_stdin_reader(
    clipboard: LocalClipboard, stream: TextIO | None = None
) -> threading.Thread:
    """Forward lines from stream to clipboard on a daemon thread.

    Args:
        clipboard: Local clipboard receiving each line as a local change.
        stream: Text stream to read; defaults to sys.stdin.

    Returns:
        The started reader thread.
    """
    source = sys.stdin if stream is None else stream

    def pump() -> None:
        for line in source:
            clipboard.set_text(line.rstrip("\n"))
        logger.debug("Standard input closed")

    thread = threading.Thread(target=pump, name="emuclip-stdin", daemon=True)
    thread.start()
    return thread


async def run_daemon(config: BridgeConfig, read_stdin: bool = False) -> None:
    """Run the clipboard bridge until a shutdown signal arrives.

    Args:
        config: Bridge settings.
        read_stdin: If True, forward stdin lines as local clipboard changes.
    """
    clipboard = LocalClipboard()

    def on_remote_update(text: str) -> None:
        clipboard.apply_remote(text)
        click.echo(text)

    # Register signal handlers for clean shutdown
    shutdown_requested = asyncio.Event()
    loop = asyncio.get_running_loop()
    loop.add_signal_handler(signal.SIGINT, shutdown_requested.set)
    loop.add_signal_handler(signal.SIGTERM, shutdown_requested.set)

    logger.debug("Bridging clipboard with %s", config.describe_address())
    async with ClipboardBridge(on_remote_update, config) as bridge:
        clipboard.on_change = bridge.on_local_clipboard_changed
        if read_stdin:
            start_stdin_reader(clipboard)
        await shutdown_requested.wait()
        logger.debug("Shutdown requested")
