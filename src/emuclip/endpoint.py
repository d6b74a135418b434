#!/usr/bin/env python3
"""A live, handshaken connection to the host clipboard service."""

from __future__ import annotations

import asyncio
from contextlib import suppress
from dataclasses import dataclass, field

from emuclip.protocol import encode_frame


@dataclass(eq=False)
class Endpoint:
    """One live connection to the host.

    The receive loop is the only reader. Writers borrow the endpoint for a
    single frame; write_lock keeps concurrent frames from interleaving and
    is never taken by the reader.

    Attributes:
        reader: The asyncio StreamReader for the connection.
        writer: The asyncio StreamWriter for the connection.
        write_lock: Serializes frame writes among themselves.
    """

    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter
    write_lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def write_frame(self, payload: bytes) -> None:
        """Write one complete frame and wait for it to be flushed.

        Raises:
            OSError: If the connection fails during the write.
        """
        async with self.write_lock:
            self.writer.write(encode_frame(payload))
            await self.writer.drain()

    def close(self) -> None:
        """Close the underlying connection, ignoring errors from a dead socket."""
        with suppress(OSError):
            self.writer.close()
