"""IR models for GraphQL record types and their fields.

This module defines the intermediate representation produced by the
transformer and consumed by the SDL writer. Record types reference each
other by name only, so the list can be rendered without the source tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ScalarType(Enum):
    """Built-in GraphQL scalar types."""

    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"


@dataclass(frozen=True)
class Field:
    """A typed field of a record type.

    Attributes
    ----------
        name: Field name as written in the SDL.
        type_ref: A scalar name or the type_name of another record type.
        description: Optional description, empty when absent.
        required: Field is non-null (rendered with a trailing ``!``).
        repeated: Field is a list (rendered wrapped in ``[...]``).

    """

    name: str
    type_ref: str
    description: str = ""
    required: bool = False
    repeated: bool = False


@dataclass
class RecordType:
    """A named, ordered collection of fields (a GraphQL ``type``).

    Mutable: the transformer places a record in the output list
    before its fields are complete and appends to ``fields`` while walking.
    """

    type_name: str
    description: str = ""
    fields: list[Field] = field(default_factory=list)

    def add_field(self, new_field: Field) -> None:
        """Append a field, keeping discovery order."""
        self.fields.append(new_field)

    def get_field(self, name: str) -> Field | None:
        """Get a field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def field_names(self) -> list[str]:
        """Names of all fields in order."""
        return [f.name for f in self.fields]
