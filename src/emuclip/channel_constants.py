#!/usr/bin/env python3
"""Constants for the host clipboard channel.

These constants describe where the host clipboard service lives and how
often a failed connection attempt is retried.
"""

# Service name sent in the handshake to select the clipboard pipe.
PIPE_NAME: str = "pipe:clipboard"

# Well-known vsock context ID of the host (VMADDR_CID_HOST).
HOST_CID: int = 2

# Host-side port of the clipboard service.
HOST_PORT: int = 5000

# Fixed delay between connection attempts in seconds.
RETRY_DELAY: float = 0.1
