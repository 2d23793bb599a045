"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest
from cdm_metagen.models import Schema
from cdm_metagen.models.loader import load_schema

from tests.fixtures.sample_schemas import FULL_SCHEMA, MINIMAL_SCHEMA


@pytest.fixture
def write_schema(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing schema text to a file in tmp_path."""

    def _write(content: str, name: str = "schema.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def minimal_schema_file(write_schema: Callable[..., Path]) -> Path:
    """Return path to a schema with a single enum."""
    return write_schema(MINIMAL_SCHEMA, "minimal.yaml")


@pytest.fixture
def full_schema_file(write_schema: Callable[..., Path]) -> Path:
    """Return path to a schema exercising inheritance, renames and synthetic fields."""
    return write_schema(FULL_SCHEMA, "cdm.yaml")


@pytest.fixture
def full_schema(full_schema_file: Path) -> Schema:
    """Return the loaded full schema."""
    return load_schema(full_schema_file)
