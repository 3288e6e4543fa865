"""Pydantic model of a JSON Schema document tree."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SchemaKind(str, Enum):
    """JSON Schema `type` values understood by the transformer."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"

    @classmethod
    def parse(cls, value: str | None) -> SchemaKind | None:
        """Return the matching kind, or None for a missing or unknown value."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class Combinator(Enum):
    """Schema combinators, in the order they are processed."""

    ALL_OF = "allOf"
    ONE_OF = "oneOf"
    ANY_OF = "anyOf"

    @property
    def links_parent(self) -> bool:
        """Whether members are added as fields of the combining record.

        allOf members are merged into the parent by reference; oneOf and
        anyOf members are only emitted as standalone alternative types.
        """
        return self is Combinator.ALL_OF


class SchemaNode(BaseModel):
    """A node of a JSON Schema document.

    Only the keywords needed to build record types are modeled; every other
    JSON Schema keyword (``format``, ``minimum``, ``$schema``, ...) is ignored.
    ``properties`` keeps document order, which later becomes field order.

    Example:
    -------
        ```json
        {
          "title": "Person",
          "type": "object",
          "required": ["name"],
          "properties": {
            "name": {"type": "string"},
            "address": {"$ref": "#/$defs/address"}
          },
          "$defs": {
            "address": {"type": "object", "properties": {"street": {"type": "string"}}}
          }
        }
        ```

    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    title: Annotated[
        str | None,
        Field(default=None, description="Display name, used as the type name"),
    ]
    description: Annotated[
        str | None,
        Field(default=None, description="Human readable description"),
    ]
    kind: Annotated[
        str | None,
        Field(default=None, alias="type", description="JSON Schema type keyword"),
    ]
    properties: Annotated[
        dict[str, SchemaNode],
        Field(default_factory=dict, description="Child schemas in document order"),
    ]
    items: Annotated[
        SchemaNode | None,
        Field(default=None, description="Element schema of an array"),
    ]
    required: Annotated[
        list[str],
        Field(default_factory=list, description="Keys of required properties"),
    ]
    ref: Annotated[
        str | None,
        Field(default=None, alias="$ref", description="Local or external reference"),
    ]
    definitions: Annotated[
        dict[str, SchemaNode],
        Field(default_factory=dict, description="Local definitions ($defs/definitions)"),
    ]
    all_of: Annotated[list[SchemaNode], Field(default_factory=list, alias="allOf")]
    one_of: Annotated[list[SchemaNode], Field(default_factory=list, alias="oneOf")]
    any_of: Annotated[list[SchemaNode], Field(default_factory=list, alias="anyOf")]

    @model_validator(mode="before")
    @classmethod
    def merge_definition_sections(cls, data: Any) -> Any:
        """Merge ``$defs`` and legacy ``definitions`` into one mapping.

        ``$defs`` entries come first and win on name clashes.
        """
        if not isinstance(data, dict) or "$defs" not in data:
            return data
        merged: dict[str, Any] = dict(data["$defs"] or {})
        for name, definition in (data.get("definitions") or {}).items():
            merged.setdefault(name, definition)
        data = {key: value for key, value in data.items() if key != "$defs"}
        data["definitions"] = merged
        return data

    @field_validator("kind", mode="before")
    @classmethod
    def reduce_nullable_kind(cls, v: Any) -> Any:
        """Reduce ``["string", "null"]`` style type lists to the single non-null type."""
        if isinstance(v, list):
            kinds = [kind for kind in v if kind != "null"]
            if len(kinds) == 1:
                return kinds[0]
            return " | ".join(str(kind) for kind in kinds) or "null"
        return v

    @property
    def schema_kind(self) -> SchemaKind | None:
        """Parsed kind, or None when the type is missing or unsupported.

        A node without ``type`` that declares ``properties`` is an object.
        """
        if self.kind is None and self.properties:
            return SchemaKind.OBJECT
        return SchemaKind.parse(self.kind)

    @property
    def combinators(self) -> tuple[tuple[Combinator, list[SchemaNode]], ...]:
        """Combinator lists in processing order: allOf, oneOf, anyOf."""
        return (
            (Combinator.ALL_OF, self.all_of),
            (Combinator.ONE_OF, self.one_of),
            (Combinator.ANY_OF, self.any_of),
        )
