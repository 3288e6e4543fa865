"""Conversion settings."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jgschema.models.loader import load_schema_file


class ConversionSettings(BaseModel):
    """Settings controlling reference resolution and rendering.

    Example:
    -------
        ```yaml
        definition_markers: ["$defs", "definitions"]
        external_suffixes: [".json", ".yaml"]
        max_depth: 32
        indent: "  "
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    definition_markers: Annotated[
        tuple[str, ...],
        Field(
            default=("$defs", "definitions"),
            min_length=1,
            description="Fragment sections that hold local definitions",
        ),
    ]
    external_suffixes: Annotated[
        tuple[str, ...],
        Field(
            default=(".json", ".yaml", ".yml"),
            min_length=1,
            description="File suffixes recognized as external schema documents",
        ),
    ]
    max_depth: Annotated[
        int,
        Field(default=64, gt=0, le=128, description="Maximum nesting depth before aborting"),
    ]
    indent: Annotated[
        str,
        Field(default="\t", description="Indentation of fields in the SDL output"),
    ]

    @field_validator("external_suffixes")
    @classmethod
    def normalize_suffixes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Lowercase suffixes and make sure they start with a dot."""
        return tuple(s.lower() if s.startswith(".") else f".{s.lower()}" for s in v)


def load_settings(path: Path | None = None) -> ConversionSettings:
    """Load settings from a YAML/JSON file, or return the defaults.

    Raises
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If a setting has an invalid value.

    """
    if path is None:
        return ConversionSettings()
    return ConversionSettings.model_validate(load_schema_file(path))
