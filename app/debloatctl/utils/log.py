"""Logging setup for the CLI."""

import logging

from rich.logging import RichHandler

from debloatctl.utils.formatting import err_console


def configure_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
