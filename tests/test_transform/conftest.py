"""Shared test fixtures for transform tests."""

from pathlib import Path
from typing import Any

import pytest
from jgschema.models.loader import LoaderError
from jgschema.models.schema import SchemaNode


class InMemoryLoader:
    """Reference loader serving documents from a dict, counting loads."""

    def __init__(self, documents: dict[str, dict[str, Any]]) -> None:
        self.documents = {path: SchemaNode.model_validate(doc) for path, doc in documents.items()}
        self.loaded: list[Path] = []

    def load(self, location: Path) -> SchemaNode:
        self.loaded.append(location)
        try:
            return self.documents[location.as_posix()]
        except KeyError:
            raise LoaderError(f"File not found: {location}", location) from None


@pytest.fixture
def make_loader():
    """Return a factory for in-memory reference loaders."""
    return InMemoryLoader


@pytest.fixture
def simple_root() -> SchemaNode:
    """Return a root schema with one required string field."""
    return SchemaNode.model_validate(
        {
            "title": "Test",
            "type": "object",
            "required": ["name"],
            "properties": {"name": {"type": "string"}},
        }
    )
