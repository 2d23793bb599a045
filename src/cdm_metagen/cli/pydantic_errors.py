"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This field is not allowed in this context",
    "string_type": "Must be a string",
    "int_type": "Must be an integer",
    "int_parsing": "Must be an integer",
    "list_type": "Must be a list",
    "dict_type": "Must be an object/dictionary",
    "frozen_set_type": "Must be a list of tags",
    "literal_error": "Must be one of the allowed values",
    "value_error": "Invalid value",
    "string_too_short": "String is too short",
    "greater_than_equal": "Value is too small",
    "union_tag_invalid": "Unknown declaration kind",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    msg = error["msg"]
    ctx = error.get("ctx") or {}

    base_msg = ERROR_TRANSLATIONS.get(error_type, msg)

    if error_type == "literal_error":
        expected = ctx.get("expected", "unknown")
        base_msg = f"Must be one of: {expected}"

    elif error_type == "string_too_short":
        min_length = ctx.get("min_length", 0)
        base_msg = f"Must be at least {min_length} characters"

    elif error_type == "greater_than_equal":
        ge = ctx.get("ge", 0)
        base_msg = f"Must be greater than or equal to {ge}"

    elif error_type == "value_error":
        error_ctx = ctx.get("error")
        if error_ctx is not None:
            base_msg = f"Invalid value: {error_ctx}"

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string, e.g. ``decls[3].fields[0].card``.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        Suggestion string or None.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    suggestions: dict[str, str] = {
        "missing": "Add the required field to the schema file",
        "extra_forbidden": "Remove this field or check for typos",
        "literal_error": (
            f"Use one of the allowed values: {ctx.get('expected', 'check documentation')}"
        ),
        "value_error": "Cardinalities look like '0..*', '(1..1)' or {lower: 0, upper: '*'}",
    }

    return suggestions.get(error_type)
