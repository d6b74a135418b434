#!/usr/bin/env python3
"""Clipboard bridge configuration.

This module provides the BridgeConfig dataclass that groups the settings
needed to reach the host clipboard service and to run the bridge.
"""

from __future__ import annotations

from dataclasses import dataclass

from emuclip.channel_constants import HOST_CID, HOST_PORT, PIPE_NAME, RETRY_DELAY


@dataclass(frozen=True)
class BridgeConfig:
    """Settings for the host clipboard bridge.

    Attributes:
        service_name: Service selected by the handshake.
        cid: vsock context ID of the host.
        port: Port of the host clipboard service.
        tcp_host: Host name to reach over TCP instead of vsock, or None.
        retry_delay: Seconds to wait between connection attempts.
        log_clipboard_access: If True, log the text of every transfer.
        max_frame_size: Largest accepted incoming payload, or None for no limit.
    """

    service_name: str = PIPE_NAME
    cid: int = HOST_CID
    port: int = HOST_PORT
    tcp_host: str | None = None
    retry_delay: float = RETRY_DELAY
    log_clipboard_access: bool = False
    max_frame_size: int | None = None

    def describe_address(self) -> str:
        """Return a human readable form of the host address."""
        if self.tcp_host is not None:
            return f"{self.tcp_host}:{self.port}"
        return f"vsock:{self.cid}:{self.port}"
