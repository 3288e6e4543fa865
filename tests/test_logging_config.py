"""Tests for CLI logging setup."""

import logging
from io import StringIO

from jgschema.logging_config import configure_logging
from rich.console import Console
from rich.logging import RichHandler


def _rich_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger("jgschema").handlers if isinstance(h, RichHandler)]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level(self) -> None:
        """Should only show warnings by default."""
        configure_logging()

        assert logging.getLogger("jgschema").level == logging.WARNING

    def test_verbose_level(self) -> None:
        """Should show debug messages when verbose."""
        console = Console(file=StringIO(), width=120)
        configure_logging(verbose=True, console=console)

        logging.getLogger("jgschema.transform").debug("walking %s", "Person")

        assert "walking Person" in console.file.getvalue()  # type: ignore[union-attr]

    def test_repeated_calls_keep_one_handler(self) -> None:
        """Should replace the handler instead of stacking them."""
        configure_logging()
        configure_logging(verbose=True)

        assert len(_rich_handlers()) == 1
