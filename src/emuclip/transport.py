#!/usr/bin/env python3
"""Transport-level connection to the host clipboard service.

This module opens the raw byte stream to the host: a vsock connection to
the host context ID, or a TCP connection when the host service is exposed
on a TCP port. The handshake is not part of this layer.
"""

from __future__ import annotations

import asyncio
import socket
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from emuclip.bridge_config import BridgeConfig


class ConnectFailure(ConnectionError):
    """Raised when a connection to the host cannot be established."""

    pass


async def open_vsock_connection(
    cid: int, port: int
) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Open an asyncio stream over an AF_VSOCK socket.

    Args:
        cid: Context ID of the peer (2 for the host).
        port: vsock port of the peer service.

    Returns:
        Tuple of (StreamReader, StreamWriter) for the connection.

    Raises:
        OSError: If the socket cannot be created or connected.
    """
    family = getattr(socket, "AF_VSOCK", None)
    if family is None:
        raise OSError("AF_VSOCK is not supported on this platform")
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setblocking(False)
        await asyncio.get_running_loop().sock_connect(sock, (cid, port))
        return await asyncio.open_connection(sock=sock)
    except BaseException:
        sock.close()
        raise


async def open_transport(
    config: BridgeConfig,
) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Connect to the host clipboard service.

    Args:
        config: Bridge settings naming the host address.

    Returns:
        Tuple of (StreamReader, StreamWriter) for the connection.

    Raises:
        ConnectFailure: If the connection fails (refused, unreachable, etc).
    """
    try:
        if config.tcp_host is not None:
            return await asyncio.open_connection(config.tcp_host, config.port)
        return await open_vsock_connection(config.cid, config.port)
    except OSError as e:
        raise ConnectFailure(
            f"Failed to connect to {config.describe_address()}: {e}"
        ) from e
