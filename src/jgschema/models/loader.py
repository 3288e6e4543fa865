"""YAML/JSON schema file loading utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

import yaml

from jgschema.models.schema import SchemaNode

logger = logging.getLogger(__name__)

SCHEMA_SUFFIXES = frozenset({".json", ".yaml", ".yml"})


class LoaderError(Exception):
    """Error during YAML/JSON file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize LoaderError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class ReferenceLoader(Protocol):
    """Fetches externally referenced schema documents."""

    def load(self, location: Path) -> SchemaNode:
        """Load and parse the schema document at ``location``."""
        ...


def load_schema_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON file and return the raw dictionary.

    ``.json`` files are parsed as strict JSON, ``.yaml``/``.yml`` files with
    ``yaml.safe_load``. Mapping order is preserved.

    Args:
    ----
        path: Path to the YAML or JSON file.

    Returns:
    -------
        Parsed dictionary from the file.

    Raises:
    ------
        LoaderError: If the file cannot be loaded or parsed.

    """
    if not path.exists():
        raise LoaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise LoaderError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in SCHEMA_SUFFIXES:
        raise LoaderError(
            f"Unsupported file extension: {suffix}. Use .json, .yaml, or .yml",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
    except json.JSONDecodeError as e:
        raise LoaderError(f"JSON parsing error: {e}", path) from e
    except yaml.YAMLError as e:
        raise LoaderError(f"YAML parsing error: {e}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"File read error: {e}", path) from e

    if data is None:
        raise LoaderError("File is empty", path)

    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    return data


def load_schema_document(path: Path) -> SchemaNode:
    """Load a schema document from a YAML/JSON file.

    Args:
    ----
        path: Path to the schema file.

    Returns:
    -------
        Parsed SchemaNode tree.

    Raises:
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the content does not fit the schema node model.

    """
    data = load_schema_file(path)
    logger.debug("Loaded schema document %s", path)
    return SchemaNode.model_validate(data)


class FileReferenceLoader:
    """Reference loader reading schema documents from the local filesystem."""

    def load(self, location: Path) -> SchemaNode:
        """Load the schema document at ``location``."""
        return load_schema_document(location)
