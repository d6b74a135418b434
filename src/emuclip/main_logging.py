"""Logging configuration for the emuclip CLI."""
import logging


def configure_logging(verbose: bool, log_clipboard_access: bool = False) -> None:
    """Configure logging level based on verbosity setting.

    Args:
        verbose: If True, set DEBUG level; otherwise WARNING level.
        log_clipboard_access: If True, raise the level to at least INFO so
            clipboard transfers are shown.

    Errors are always printed to stderr regardless of verbosity.
    """
    if verbose:
        level = logging.DEBUG
    elif log_clipboard_access:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
