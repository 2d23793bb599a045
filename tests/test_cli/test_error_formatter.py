"""Tests for error formatter."""

from io import StringIO

import pytest
from cdm_metagen.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
from cdm_metagen.validation.errors import ValidationResult
from rich.console import Console


@pytest.fixture
def string_console() -> Console:
    """Create a console that writes to a string."""
    return Console(file=StringIO(), width=100)


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestErrorFormatter:
    """Tests for ErrorFormatter."""

    def test_format_empty_result(self, string_console: Console) -> None:
        """Should show success for empty result."""
        ErrorFormatter(string_console).format_validation_result(ValidationResult())
        assert "passed" in _output(string_console).lower()

    def test_format_with_errors(self, string_console: Console) -> None:
        """Should show errors with code, message and path."""
        result = ValidationResult()
        result.add_error("E001", "Type 'Product' is referenced", "Trade.fields.product")

        ErrorFormatter(string_console).format_validation_result(result, "Cdm.Classes")

        output = _output(string_console)
        assert "Validation Failed" in output
        assert "Module: Cdm.Classes" in output
        assert "[E001]" in output
        assert "at Trade.fields.product" in output
        assert "1 error(s)" in output

    def test_format_with_warnings(self, string_console: Console) -> None:
        """Should show warnings."""
        result = ValidationResult()
        result.add_warning("W005", "'key' is a DAML keyword", "Trade.fields.key")

        ErrorFormatter(string_console).format_validation_result(result)

        output = _output(string_console)
        assert "Validation Warnings" in output
        assert "W005" in output
        assert "1 warning(s)" in output

    def test_shows_suggestion(self, string_console: Console) -> None:
        """Should show suggestion when provided."""
        result = ValidationResult()
        result.add_error("E101", "Duplicate", "Trade", suggestion="Rename one of them")

        ErrorFormatter(string_console).format_validation_result(result)
        assert "Rename one of them" in _output(string_console)


class TestErrorTable:
    """Tests for ErrorTable."""

    def test_rows(self, string_console: Console) -> None:
        """Should list every issue with its location."""
        result = ValidationResult()
        result.add_error("E001", "Unresolved", "Trade.fields.product")
        result.add_warning("W006", "Empty", "Nothing")

        ErrorTable(string_console).print_result(result)

        output = _output(string_console)
        assert "E001" in output
        assert "W006" in output
        assert "Trade.fields.product" in output


class TestErrorTree:
    """Tests for ErrorTree."""

    def test_grouped_by_declaration(self, string_console: Console) -> None:
        """Should group issues under their declaration."""
        result = ValidationResult()
        result.add_error("E001", "Unresolved", "Trade.fields.product")
        result.add_error("E102", "Duplicate field", "Trade.fields.id")
        result.add_warning("W006", "Empty", "Nothing")

        ErrorTree(string_console).print_result(result)

        output = _output(string_console)
        assert "Trade (2 issues)" in output
        assert "Nothing (1 issues)" in output
