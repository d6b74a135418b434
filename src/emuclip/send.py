#!/usr/bin/env python3
"""Push of local clipboard changes to the host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from emuclip.protocol import encode_text

if TYPE_CHECKING:
    from emuclip.channel import ChannelHandle

logger = logging.getLogger(__name__)


async def send_clipboard_text(
    channel: ChannelHandle,
    text: str,
    log_clipboard_access: bool = False,
) -> bool:
    """Send local clipboard text to the host over the current channel.

    Nothing is queued: when the channel is empty the update is dropped,
    and a failed write is logged and dropped as well. The channel is never
    cleared here; the receive loop owns cleanup of broken connections.

    Args:
        channel: Handle owning the connection to the host.
        text: New local clipboard text.
        log_clipboard_access: If True, log the sent text.

    Returns:
        True if the frame was written, False if it was dropped.
    """
    endpoint = channel.get()
    if endpoint is None:
        logger.debug("Not connected, dropping clipboard update")
        return False

    if log_clipboard_access:
        logger.info("Setting the host clipboard to %r", text)
    payload = encode_text(text)
    try:
        await endpoint.write_frame(payload)
    except OSError as e:
        logger.error("Failed to set host clipboard: %s", e)
        return False
    logger.debug("Sent %d bytes to host", len(payload))
    return True
