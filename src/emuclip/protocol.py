#!/usr/bin/env python3
"""
Length-prefixed framing for clipboard content.

Each message on the wire is a frame: a 4-byte unsigned little-endian length
followed by exactly that many payload bytes. Clipboard text travels as
UTF-8. Before any frame is exchanged the connecting side sends a handshake:
the ASCII service name terminated by a single zero byte.

Example: the text "hello" is framed as b"\\x05\\x00\\x00\\x00hello".

There is no response to the handshake and no correlation between frames;
either side may push a frame at any time.
"""
from __future__ import annotations

import asyncio
import struct

from emuclip.channel_constants import PIPE_NAME

# Frame header: unsigned 32-bit little-endian payload length.
HEADER = struct.Struct("<I")


class TransportError(Exception):
    """
    Exception raised when the transport fails during frame I/O.

    Raised on lower-level I/O faults while reading a frame, and on
    frames declaring a length above the configured limit.
    """

    pass


class TransportClosed(TransportError):
    """Raised when the remote side closes the stream before a frame is complete."""

    pass


def encode_frame(payload: bytes) -> bytes:
    """
    Encode raw bytes as a frame.

    Args:
        payload: Raw message bytes.

    Returns:
        The 4-byte little-endian length header followed by the payload.
    """
    return HEADER.pack(len(payload)) + payload


def encode_handshake(service_name: str = PIPE_NAME) -> bytes:
    """
    Build the handshake selecting a service on a fresh connection.

    Args:
        service_name: ASCII name of the host service.

    Returns:
        The service name bytes followed by one zero byte.
    """
    return service_name.encode("ascii") + b"\x00"


def encode_text(text: str) -> bytes:
    """Encode clipboard text for the wire."""
    return text.encode("utf-8")


def decode_text(payload: bytes) -> str:
    """
    Decode a frame payload as clipboard text.

    Invalid UTF-8 sequences are replaced rather than rejected, so any
    payload received intact is still delivered.
    """
    return payload.decode("utf-8", errors="replace")


async def _read_exactly(reader: asyncio.StreamReader, size: int) -> bytes:
    try:
        return await reader.readexactly(size)
    except asyncio.IncompleteReadError as e:
        raise TransportClosed(
            f"Connection closed after {len(e.partial)} of {size} bytes"
        ) from e
    except OSError as e:
        raise TransportError(f"Read failed: {e}") from e


async def read_frame(
    reader: asyncio.StreamReader, max_length: int | None = None
) -> bytes:
    """
    Read and decode one frame from an async stream.

    Args:
        reader: asyncio StreamReader to read from.
        max_length: Largest accepted payload length, or None for no limit.

    Returns:
        The complete payload bytes.

    Raises:
        TransportClosed: If the stream ends before the frame is complete.
        TransportError: On an I/O fault or an oversized length field.
    """
    header = await _read_exactly(reader, HEADER.size)
    (length,) = HEADER.unpack(header)
    if max_length is not None and length > max_length:
        raise TransportError(f"Frame size {length} exceeds limit {max_length}")
    return await _read_exactly(reader, length)
