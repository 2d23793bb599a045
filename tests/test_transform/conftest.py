"""Shared test fixtures for transform tests."""

from collections.abc import Callable
from typing import Any

import pytest
from cdm_metagen.models.schema import Schema


@pytest.fixture
def make_schema() -> Callable[..., Schema]:
    """Return a helper building a Schema from raw declaration dicts."""

    def _make(*decls: dict[str, Any]) -> Schema:
        return Schema.model_validate({"decls": list(decls)})

    return _make


@pytest.fixture
def status_schema(make_schema: Callable[..., Schema]) -> Schema:
    """Return enum Status extending Common."""
    return make_schema(
        {"kind": "enum", "name": "Common", "values": [{"name": "Pending"}]},
        {"kind": "enum", "name": "Status", "base": "Common", "values": [{"name": "Closed"}]},
    )


@pytest.fixture
def trade_schema(make_schema: Callable[..., Schema]) -> Schema:
    """Return key-tagged class Trade with one amount field."""
    return make_schema(
        {
            "kind": "class",
            "name": "Trade",
            "tags": ["key"],
            "fields": [{"name": "amount", "type": "number", "card": "1..1"}],
        }
    )
