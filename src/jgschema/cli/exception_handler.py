"""CLI exception reporting."""

from __future__ import annotations

import traceback

from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from jgschema.converters.sdl_writer import RenderError
from jgschema.models.loader import LoaderError
from jgschema.transform.errors import TransformError

console = Console(stderr=True)


def report_exception(error: Exception, verbose: bool = False, out: Console | None = None) -> None:
    """Print a formatted report for an error raised by a CLI command.

    Args:
    ----
        error: The exception to report.
        verbose: Whether to show full tracebacks.
        out: Console to print to, defaults to stderr.

    """
    target = out or console
    if isinstance(error, TransformError):
        _handle_transform_error(error, target)
    elif isinstance(error, PydanticValidationError):
        _handle_pydantic_error(error, verbose, target)
    elif isinstance(error, LoaderError):
        _handle_loader_error(error, target)
    elif isinstance(error, RenderError):
        _handle_panel("Render Error", str(error), target)
    elif isinstance(error, PermissionError):
        filename = error.filename or "unknown"
        _handle_panel(
            "Error",
            f"Permission denied: {filename}\n\nCheck file permissions and try again.",
            target,
        )
    else:
        _handle_panel("Error", f"An unexpected error occurred:\n{error}", target)
        if verbose:
            target.print("\n[dim]Traceback:[/dim]")
            target.print(escape(traceback.format_exc()))
        else:
            target.print("\n[dim]Use --verbose for full traceback[/dim]")


def _handle_transform_error(error: TransformError, out: Console) -> None:
    """Handle errors from the schema walk."""
    from jgschema.cli.error_formatter import ErrorFormatter

    ErrorFormatter(out).format_transform_error(error)


def _handle_loader_error(error: LoaderError, out: Console) -> None:
    """Handle file loading errors."""
    message = str(error)
    if error.path is not None:
        message = f"{message}\n\nPlease check that the file path is correct."
    _handle_panel("Load Error", message, out)


def _handle_pydantic_error(error: PydanticValidationError, verbose: bool, out: Console) -> None:
    """Handle Pydantic validation errors."""
    from jgschema.cli.pydantic_errors import (
        format_pydantic_location,
        get_suggestion_for_error,
        translate_pydantic_error,
    )

    out.print(f"[red bold]Invalid {escape(error.title)} document[/red bold]")
    out.print()

    for err in error.errors():
        location = format_pydantic_location(err["loc"])
        msg = translate_pydantic_error(err)
        suggestion = get_suggestion_for_error(err)

        out.print(f"[red]✗[/red] {escape(location)}")
        out.print(f"  {escape(msg)}")
        out.print(f"  [dim]({err['type']})[/dim]")

        if suggestion:
            out.print(f"  [green]💡 {escape(suggestion)}[/green]")

        out.print()

    if verbose:
        out.print("[dim]Full error:[/dim]")
        out.print(escape(str(error)))


def _handle_panel(title: str, message: str, out: Console) -> None:
    out.print(Panel(f"[red]{escape(message)}[/red]", title=title, border_style="red"))
