"""Logging setup for the command-line interface."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "jgschema"


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route package log records to a Rich handler on stderr.

    Library modules only create loggers; this is called once by the CLI.
    Calling it again replaces the previous handler.

    Args:
    ----
        verbose: Log at DEBUG level instead of WARNING.
        console: Console to write to, defaults to stderr.

    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
