"""Render record types as GraphQL SDL.

Output is a bare sequence of ``type`` declarations, one per record, in list
order and separated by a blank line. No ``schema { ... }`` block is written,
so the text can be included in a larger document.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from jgschema.ir.types import Field, RecordType

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Error while rendering record types."""


def render_type(field: Field) -> str:
    """Render a field's type: ``[T]`` when repeated, ``T!`` when required."""
    rendered = field.type_ref
    if field.repeated:
        rendered = f"[{rendered}]"
    if field.required:
        rendered = f"{rendered}!"
    return rendered


def quote_description(description: str) -> str:
    """Quote a description as a GraphQL string value."""
    escaped = (
        description.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


class SDLWriter:
    """Write record types as GraphQL schema definition language.

    Usage:
        writer = SDLWriter()
        writer.write(records, Path("schema.graphql"))

    Or for in-memory conversion:
        sdl = writer.render(records)
    """

    def __init__(self, indent: str = "\t") -> None:
        """Initialize the SDL writer.

        Args:
        ----
            indent: Indentation for field lines.

        """
        self._indent = indent

    def render(self, records: Sequence[RecordType] | None) -> str:
        """Render record types to SDL text without a trailing newline.

        Raises
        ------
            RenderError: If no record list is given.

        """
        if records is None:
            raise RenderError("No record types were passed to the SDL writer")
        return "\n\n".join(self._render_record(record) for record in records)

    def write(self, records: Sequence[RecordType] | None, output_path: Path) -> None:
        """Write record types to an SDL file.

        Args:
        ----
            records: Record types to write.
            output_path: Output file path. Parent directories will be created.

        """
        sdl = self.render(records)

        # Ensure parent directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)

        output_path.write_text(f"{sdl}\n", encoding="utf-8")
        logger.debug("Wrote %d byte(s) of SDL to %s", len(sdl) + 1, output_path)

    def _render_record(self, record: RecordType) -> str:
        lines: list[str] = []
        if record.description:
            lines.append(quote_description(record.description))

        lines.append(f"type {record.type_name} {{")
        for index, field in enumerate(record.fields):
            if field.description:
                # Described fields after the first are set apart by a blank line
                if index != 0:
                    lines.append("")
                lines.append(f"{self._indent}{quote_description(field.description)}")
            lines.append(f"{self._indent}{field.name}: {render_type(field)}")
        lines.append("}")

        return "\n".join(lines)


def render(records: Sequence[RecordType] | None) -> str:
    """Render record types to SDL text with default settings."""
    return SDLWriter().render(records)
