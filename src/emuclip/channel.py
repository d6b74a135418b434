#!/usr/bin/env python3
"""Channel handle owning the single connection to the host.

This module provides the ChannelHandle, a thread-safe single slot holding
the current endpoint, and the connection logic that fills it. Connection
attempts are retried forever at a fixed interval using tenacity, since the
host service is expected to become available eventually.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import TYPE_CHECKING, Awaitable, Callable

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_never,
    wait_fixed,
)

from emuclip.bridge_config import BridgeConfig
from emuclip.endpoint import Endpoint
from emuclip.protocol import encode_handshake
from emuclip.transport import ConnectFailure, open_transport

if TYPE_CHECKING:
    Connector = Callable[
        [BridgeConfig], Awaitable[tuple[asyncio.StreamReader, asyncio.StreamWriter]]
    ]

logger = logging.getLogger(__name__)


class ChannelHandle:
    """Single-slot holder for the current connection to the host.

    get(), set() and clear() swap the slot under a lock and may be called
    from any thread. The lock never covers socket I/O; closing a removed
    endpoint happens after the swap.
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        connector: Connector = open_transport,
    ) -> None:
        self._config = config or BridgeConfig()
        self._connector = connector
        self._lock = threading.Lock()
        self._endpoint: Endpoint | None = None

    def get(self) -> Endpoint | None:
        """Return the current endpoint, or None when disconnected."""
        with self._lock:
            return self._endpoint

    def set(self, endpoint: Endpoint) -> None:
        """Store endpoint as the current connection.

        A different endpoint previously held is closed.
        """
        with self._lock:
            previous, self._endpoint = self._endpoint, endpoint
        if previous is not None and previous is not endpoint:
            previous.close()

    def clear(self) -> None:
        """Drop and close the current endpoint, if any."""
        with self._lock:
            endpoint, self._endpoint = self._endpoint, None
        if endpoint is not None:
            endpoint.close()
            logger.debug("Channel to %s cleared", self._config.describe_address())

    async def connect_blocking(self) -> Endpoint:
        """Return the current endpoint, connecting first if needed.

        Failed attempts are torn down and retried every retry_delay
        seconds with no upper bound. Cancelling the calling task is the
        only way to abort.

        Returns:
            The live, handshaken endpoint now held by this handle.
        """
        endpoint = self.get()
        if endpoint is not None:
            return endpoint

        retrying = AsyncRetrying(
            wait=wait_fixed(self._config.retry_delay),
            retry=retry_if_exception_type(ConnectFailure),
            stop=stop_never,
            before_sleep=before_sleep_log(logger, logging.DEBUG),
            reraise=True,
        )
        endpoint = await retrying(self._open_endpoint)
        self.set(endpoint)
        logger.debug("Connected to %s", self._config.describe_address())
        return endpoint

    async def _open_endpoint(self) -> Endpoint:
        """Open one connection and send the handshake.

        Raises:
            ConnectFailure: If connecting or writing the handshake fails.
        """
        reader, writer = await self._connector(self._config)
        endpoint = Endpoint(reader, writer)
        try:
            writer.write(encode_handshake(self._config.service_name))
            await writer.drain()
        except OSError as e:
            endpoint.close()
            raise ConnectFailure(f"Handshake failed: {e}") from e
        except asyncio.CancelledError:
            endpoint.close()
            raise
        return endpoint
