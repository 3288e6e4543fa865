"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def jsonschema_dir(fixtures_dir: Path) -> Path:
    """Return path to the JSON Schema sample documents."""
    return fixtures_dir / "jsonschema"
