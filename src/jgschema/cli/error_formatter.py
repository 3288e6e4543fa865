"""Terminal formatting of transformation errors and record types with Rich."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from jgschema.converters.sdl_writer import render_type
from jgschema.transform.errors import (
    CyclicReferenceError,
    ExternalResolutionError,
    MalformedReferenceError,
    MissingTitleError,
    RecursionLimitError,
    UnknownDefinitionError,
    UnsupportedKindError,
)

if TYPE_CHECKING:
    from jgschema.ir.types import RecordType
    from jgschema.transform.errors import TransformError

SUGGESTIONS: dict[type, str] = {
    MissingTitleError: 'Add a "title" to the root of the schema',
    MalformedReferenceError: 'Use "#/$defs/<name>" or a path to a .json/.yaml file',
    UnknownDefinitionError: "Check the definition name for typos",
    ExternalResolutionError: "Check that the referenced file exists next to the schema",
    UnsupportedKindError: "Use object, array, string, integer, number or boolean",
    CyclicReferenceError: "Break the cycle; recursive types cannot be flattened",
    RecursionLimitError: "Raise max_depth in the settings file if the nesting is intended",
}


class ErrorFormatter:
    """Formats transformation errors for terminal display."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def format_transform_error(self, error: TransformError) -> None:
        """Print a transformation error with its location and a hint."""
        content = Text()
        content.append(str(error), style="red")
        if error.path:
            content.append(f"\nat {error.path}", style="dim")
        if isinstance(error, CyclicReferenceError):
            content.append("\n\nReference chain:\n", style="bold")
            content.append("\n".join(f"  {step}" for step in error.chain))

        self.console.print(
            Panel(content, title=type(error).__name__, border_style="red")
        )

        suggestion = SUGGESTIONS.get(type(error))
        if suggestion:
            self.console.print(f"  [green]💡 {escape(suggestion)}[/green]")


class RecordTable:
    """Display record types as a table."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize record table formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console()

    def print_records(self, records: Sequence[RecordType]) -> None:
        """Print one row per record type, in output order."""
        table = Table(title="Record Types")

        table.add_column("#", style="dim", width=4)
        table.add_column("Type", style="cyan")
        table.add_column("Fields", justify="right")
        table.add_column("Description")

        for index, record in enumerate(records):
            table.add_row(
                str(index),
                record.type_name,
                str(len(record.fields)),
                record.description or "-",
            )

        self.console.print(table)


class RecordTree:
    """Display record types as a tree of types and their fields."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize record tree formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console()

    def print_records(self, records: Sequence[RecordType]) -> None:
        """Print each record type with its rendered fields."""
        tree = Tree("[bold]Record Types[/bold]")

        for record in records:
            node = tree.add(f"[cyan]{escape(record.type_name)}[/cyan] ({len(record.fields)} fields)")
            for field in record.fields:
                node.add(f"{escape(field.name)}: [green]{escape(render_type(field))}[/green]")

        self.console.print(tree)
