"""Common types and validators for Pydantic models."""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

UNBOUNDED_MARKERS = frozenset({"*", "unbounded", "n"})

_RANGE_PATTERN = re.compile(r"^\(?\s*(\d+)\s*\.\.\s*(\*|\d+)\s*\)?$")


def parse_upper_bound(value: Any) -> int | None:
    """Parse an upper occurrence bound.

    Args:
    ----
        value: An integer, a numeric string, or one of the unbounded
            markers ("*", "unbounded", "n"). None also means unbounded.

    Returns:
    -------
        The bound as an integer, or None when unbounded.

    Raises:
    ------
        ValueError: If the value cannot be parsed.

    Examples:
    --------
        >>> parse_upper_bound(1)
        1
        >>> parse_upper_bound("*") is None
        True
        >>> parse_upper_bound("3")
        3

    """
    if value is None:
        return None

    if isinstance(value, bool):
        raise ValueError(f"Cannot parse bool as upper bound: {value}")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        value = value.strip()
        if value.lower() in UNBOUNDED_MARKERS:
            return None
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(f"Invalid upper bound: {value}") from e

    raise ValueError(f"Cannot parse {type(value).__name__} as upper bound: {value}")


def serialize_upper_bound(value: int | None) -> int | str:
    """Serialize an upper bound, unbounded becomes "*"."""
    return "*" if value is None else value


def parse_range(value: str) -> tuple[int, int | None]:
    """Parse a Rosetta cardinality string such as ``(0..*)`` or ``1..1``.

    Args:
    ----
        value: The cardinality string.

    Returns:
    -------
        (lower, upper) with upper None when unbounded.

    Raises:
    ------
        ValueError: If the string is not a cardinality range.

    """
    match = _RANGE_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid cardinality: {value!r}, expected e.g. '0..*' or '(1..1)'")
    lower, upper = match.groups()
    return int(lower), parse_upper_bound(upper)


UpperBound = Annotated[
    int | None,
    BeforeValidator(parse_upper_bound),
    PlainSerializer(serialize_upper_bound),
]
