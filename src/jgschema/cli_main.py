"""Command-line interface for the jgschema converter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

from jgschema import __version__

if TYPE_CHECKING:
    from jgschema.config import ConversionSettings
    from jgschema.ir.types import RecordType

# Create Typer app
app = typer.Typer(
    name="jgschema",
    help="Convert JSON Schema documents to GraphQL SDL type definitions.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"jgschema version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert JSON Schema documents (JSON or YAML) to GraphQL SDL.

    Nested objects, arrays of objects, $ref targets and allOf/oneOf/anyOf
    members each become a separate GraphQL type.
    """


def _load_records(input_file: Path, settings: ConversionSettings) -> list[RecordType]:
    """Load a schema file and transform it into record types."""
    from jgschema.models import load_schema_document
    from jgschema.transform import SchemaToRecordTransformer

    root = load_schema_document(input_file)
    return SchemaToRecordTransformer(settings=settings).transform(root, input_file)


@app.command()
def convert(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input JSON/YAML schema file to convert.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output .graphql file path. Prints to stdout when omitted.",
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (YAML/JSON).",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite output file if it exists.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Convert without writing the output file.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show detailed conversion progress.",
        ),
    ] = False,
) -> None:
    """Convert a JSON/YAML schema to GraphQL SDL.

    Examples
    --------
        jgschema convert person.schema.json
        jgschema convert person.schema.json -o person.graphql
        jgschema convert person.schema.yaml -o person.graphql --force
        jgschema convert person.schema.json -o person.graphql --dry-run

    """
    from jgschema.cli.exception_handler import report_exception
    from jgschema.config import load_settings
    from jgschema.converters import SDLWriter
    from jgschema.logging_config import configure_logging

    configure_logging(verbose, error_console)

    if output is not None and output.exists() and not force and not dry_run:
        error_console.print(
            f"\n[bold red]✗ Output file already exists: {output}[/bold red]\n"
            "Use --force to overwrite."
        )
        raise typer.Exit(code=1)

    try:
        settings = load_settings(config)
        records = _load_records(input_file, settings)
        writer = SDLWriter(indent=settings.indent)
        sdl = writer.render(records)

        if output is None:
            # Plain print so the SDL is not altered by markup or wrapping
            print(sdl)
        elif dry_run:
            size = len(f"{sdl}\n".encode())
            error_console.print(
                f"[bold green]✓ Would write {size:,} bytes to {output}[/bold green]"
            )
        else:
            writer.write(records, output)
            error_console.print(
                f"[bold green]✓ Wrote {len(records)} type(s) to {output}[/bold green]"
            )
    except Exception as e:
        report_exception(e, verbose, error_console)
        raise typer.Exit(code=1) from None

    logger.debug("Converted %s into %d type(s)", input_file, len(records))


@app.command()
def inspect(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input JSON/YAML schema file to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-F",
            help="Output format: table or tree.",
        ),
    ] = "table",
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (YAML/JSON).",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show detailed progress and tracebacks.",
        ),
    ] = False,
) -> None:
    """Show the GraphQL types a schema would produce.

    Examples
    --------
        jgschema inspect person.schema.json
        jgschema inspect person.schema.json --format tree

    """
    from jgschema.cli.error_formatter import RecordTable, RecordTree
    from jgschema.cli.exception_handler import report_exception
    from jgschema.config import load_settings
    from jgschema.logging_config import configure_logging

    configure_logging(verbose, error_console)

    if output_format not in ("table", "tree"):
        error_console.print(
            f"\n[bold red]✗ Invalid format: {output_format}[/bold red]\n"
            "Supported: table, tree"
        )
        raise typer.Exit(code=1)

    try:
        records = _load_records(input_file, load_settings(config))
    except Exception as e:
        report_exception(e, verbose, error_console)
        raise typer.Exit(code=1) from None

    if output_format == "tree":
        RecordTree(console).print_records(records)
    else:
        RecordTable(console).print_records(records)


if __name__ == "__main__":
    app()
