#!/usr/bin/env python3
"""Receive loop for host clipboard updates.

This module provides run_receive_loop, the long-lived task that keeps the
channel open and delivers every frame pushed by the host to the local
clipboard sink, in arrival order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Callable

from emuclip.protocol import TransportError, decode_text, read_frame

if TYPE_CHECKING:
    from emuclip.channel import ChannelHandle

logger = logging.getLogger(__name__)


async def run_receive_loop(
    channel: ChannelHandle,
    sink: Callable[[str], object],
    stop_requested: asyncio.Event,
    log_clipboard_access: bool = False,
    max_frame_size: int | None = None,
) -> None:
    """Receive host clipboard updates until stop is requested.

    Each iteration acquires the channel (reconnecting only after a prior
    failure cleared it), reads one frame and hands the decoded text to
    sink. A broken connection is dropped from the channel and the loop
    goes back to connecting; this is the only recovery path.

    Args:
        channel: Handle owning the connection to the host.
        sink: Callable applying host text to the local clipboard.
        stop_requested: Event checked at the top of every iteration.
        log_clipboard_access: If True, log the received text.
        max_frame_size: Largest accepted payload, or None for no limit.
    """
    while not stop_requested.is_set():
        endpoint = await channel.connect_blocking()
        try:
            payload = await read_frame(endpoint.reader, max_frame_size)
        except TransportError as e:
            logger.warning("Connection lost: %s, will reconnect", e)
            channel.clear()
            continue

        text = decode_text(payload)
        if log_clipboard_access:
            logger.info("Setting the guest clipboard to %r", text)
        try:
            sink(text)
        except Exception:
            logger.exception("Failed to apply host clipboard content")
