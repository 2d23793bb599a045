"""CLI module for cdm-metagen."""

from cdm_metagen.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
from cdm_metagen.cli.exception_handler import handle_exceptions
from cdm_metagen.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)

__all__ = [
    "ErrorFormatter",
    "ErrorTable",
    "ErrorTree",
    "handle_exceptions",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]
