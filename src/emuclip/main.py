"""CLI handling for emuclip.

This module provides the command-line interface for emuclip, handling
argument parsing via click, logging configuration, and starting the
clipboard bridge daemon.

Usage:
    emuclip [--cid N | --tcp-host HOST] [--port N] [--service NAME]
            [--stdin] [--log-clipboard-access] [--max-frame-size N] [--verbose]
"""

import click

from emuclip.bridge_config import BridgeConfig
from emuclip.channel_constants import HOST_CID, HOST_PORT, PIPE_NAME
from emuclip.main_logging import configure_logging
from emuclip.main_options import MutuallyExclusiveOption


def _validate_service(ctx: click.Context, param: click.Parameter, value: str) -> str:
    """Reject service names the handshake cannot carry."""
    if not value.isascii() or "\x00" in value:
        raise click.BadParameter("must be ASCII without NUL characters")
    return value


@click.command()
@click.option(
    "--cid",
    type=click.IntRange(min=0),
    cls=MutuallyExclusiveOption,
    not_required_if=["tcp_host"],
    help=f"vsock context ID of the host [default: {HOST_CID}]",
)
@click.option(
    "--tcp-host",
    cls=MutuallyExclusiveOption,
    not_required_if=["cid"],
    help="Reach the host service over TCP at this address instead of vsock",
)
@click.option(
    "--port",
    type=click.IntRange(min=0, max=0xFFFFFFFF),
    default=HOST_PORT,
    show_default=True,
    help="Port of the host clipboard service",
)
@click.option(
    "--service",
    default=PIPE_NAME,
    show_default=True,
    callback=_validate_service,
    help="Service name sent in the handshake",
)
@click.option(
    "--stdin",
    "read_stdin",
    is_flag=True,
    help="Push each line read from stdin as a local clipboard change",
)
@click.option(
    "--log-clipboard-access",
    is_flag=True,
    help="Log the text of every clipboard transfer",
)
@click.option(
    "--max-frame-size",
    type=click.IntRange(min=0),
    help="Reject host messages larger than this many bytes",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable DEBUG-level logging",
)
def main(
    cid: int | None,
    tcp_host: str | None,
    port: int,
    service: str,
    read_stdin: bool,
    log_clipboard_access: bool,
    max_frame_size: int | None,
    verbose: bool,
) -> None:
    """Synchronize the guest clipboard with the host clipboard."""
    configure_logging(verbose, log_clipboard_access)

    config = BridgeConfig(
        service_name=service,
        cid=HOST_CID if cid is None else cid,
        port=port,
        tcp_host=tcp_host,
        log_clipboard_access=log_clipboard_access,
        max_frame_size=max_frame_size,
    )
    _run_daemon(config, read_stdin)


def _run_daemon(config: BridgeConfig, read_stdin: bool) -> None:
    """Run the bridge daemon until interrupted.

    Args:
        config: Bridge settings built from the command line.
        read_stdin: If True, forward stdin lines as local changes.
    """
    import asyncio
    from emuclip.daemon import run_daemon

    asyncio.run(run_daemon(config, read_stdin))
