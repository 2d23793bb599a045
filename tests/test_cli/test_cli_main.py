"""Tests for the CLI module."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from cdm_metagen import __version__
from cdm_metagen.cli_main import app
from typer.testing import CliRunner

from tests.fixtures.sample_schemas import (
    CYCLIC_SCHEMA,
    EMPTY_ENUM_SCHEMA,
    FULL_SCHEMA_DAML,
    INVALID_SCHEMA,
    RESERVED_WORD_SCHEMA,
    UNRESOLVED_SCHEMA,
)

runner = CliRunner()

MODULE = "Org.Isda.Cdm.Classes"


class TestVersion:
    """Tests for version option."""

    def test_version_long(self) -> None:
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_short(self) -> None:
        """Test -v flag."""
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_with_command_still_shows_version(self) -> None:
        """Test that --version takes precedence (eager option)."""
        result = runner.invoke(app, ["--version", "validate", "dummy.yaml"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestNoArgs:
    """Tests for no arguments behavior."""

    def test_no_args_shows_help(self) -> None:
        """Test that no arguments shows help."""
        result = runner.invoke(app)
        assert "validate" in result.output
        assert "convert" in result.output
        assert "info" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_validate_valid_file(self, full_schema_file: Path) -> None:
        """Test validating a valid file."""
        result = runner.invoke(app, ["validate", str(full_schema_file)])
        assert result.exit_code == 0
        assert "is valid" in result.output

    def test_validate_quiet(self, full_schema_file: Path) -> None:
        """Test that --quiet prints nothing on success."""
        result = runner.invoke(app, ["validate", str(full_schema_file), "--quiet"])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_validate_nonexistent_file(self) -> None:
        """Test validating a nonexistent file."""
        result = runner.invoke(app, ["validate", "nonexistent.yaml"])
        assert result.exit_code != 0

    def test_validate_invalid_yaml(self, write_schema: Callable[..., Path]) -> None:
        """Test validating invalid YAML syntax."""
        result = runner.invoke(app, ["validate", str(write_schema("not: valid: yaml: ["))])
        assert result.exit_code == 1

    def test_validate_invalid_schema(self, write_schema: Callable[..., Path]) -> None:
        """Test validating a file that doesn't match the schema models."""
        result = runner.invoke(app, ["validate", str(write_schema(INVALID_SCHEMA))])
        assert result.exit_code == 1
        assert "Validation failed" in result.output

    def test_validate_unresolved_reference(self, write_schema: Callable[..., Path]) -> None:
        """Test that type model errors fail validation."""
        result = runner.invoke(app, ["validate", str(write_schema(UNRESOLVED_SCHEMA))])
        assert result.exit_code == 1
        assert "E001" in result.output

    def test_validate_table_format(self, write_schema: Callable[..., Path]) -> None:
        """Test table output."""
        path = write_schema(UNRESOLVED_SCHEMA)
        result = runner.invoke(app, ["validate", str(path), "--format", "table"])
        assert result.exit_code == 1
        assert "Validation Issues" in result.output
        assert "E001" in result.output

    def test_validate_tree_format(self, write_schema: Callable[..., Path]) -> None:
        """Test tree output grouped by declaration."""
        path = write_schema(UNRESOLVED_SCHEMA)
        result = runner.invoke(app, ["validate", str(path), "-f", "tree"])
        assert result.exit_code == 1
        assert "Trade" in result.output

    def test_validate_warnings(self, write_schema: Callable[..., Path]) -> None:
        """Test that warnings pass unless strict."""
        path = write_schema(RESERVED_WORD_SCHEMA)

        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0
        assert "W005" in result.output
        assert "with warnings" in result.output

        strict = runner.invoke(app, ["validate", str(path), "--strict"])
        assert strict.exit_code == 1

    def test_validate_cycle(self, write_schema: Callable[..., Path]) -> None:
        """Test that inheritance cycles fail validation."""
        result = runner.invoke(app, ["validate", str(write_schema(CYCLIC_SCHEMA))])
        assert result.exit_code == 1
        assert "Cyclic class inheritance" in result.output


class TestConvertCommand:
    """Tests for the convert command."""

    def test_convert_default_output(self, full_schema_file: Path) -> None:
        """Test converting next to the input file."""
        result = runner.invoke(app, ["convert", str(full_schema_file), "-m", MODULE])

        assert result.exit_code == 0, result.output
        output = full_schema_file.with_suffix(".daml")
        assert output.read_text() == FULL_SCHEMA_DAML
        assert "Wrote" in result.output

    def test_convert_custom_output(self, full_schema_file: Path, tmp_path: Path) -> None:
        """Test converting with explicit output path."""
        output = tmp_path / "out" / "Classes.daml"
        output.parent.mkdir()

        result = runner.invoke(
            app, ["convert", str(full_schema_file), "--module", MODULE, "-o", str(output)]
        )
        assert result.exit_code == 0, result.output
        assert output.read_text().startswith("-- Generated by metagen\nmodule " + MODULE)

    def test_convert_requires_module(self, full_schema_file: Path) -> None:
        """Test that the module name is mandatory."""
        result = runner.invoke(app, ["convert", str(full_schema_file)])
        assert result.exit_code == 2

    def test_convert_existing_output(self, full_schema_file: Path) -> None:
        """Test that existing output is kept without --force."""
        output = full_schema_file.with_suffix(".daml")
        output.write_text("existing")

        result = runner.invoke(app, ["convert", str(full_schema_file), "-m", MODULE])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text() == "existing"

        forced = runner.invoke(app, ["convert", str(full_schema_file), "-m", MODULE, "--force"])
        assert forced.exit_code == 0
        assert output.read_text() == FULL_SCHEMA_DAML

    def test_convert_dry_run(self, full_schema_file: Path) -> None:
        """Test that --dry-run writes nothing."""
        result = runner.invoke(app, ["convert", str(full_schema_file), "-m", MODULE, "--dry-run"])

        assert result.exit_code == 0
        assert "Would write" in result.output
        assert not full_schema_file.with_suffix(".daml").exists()

    def test_convert_invalid_schema(self, write_schema: Callable[..., Path]) -> None:
        """Test that schema model errors are reported."""
        result = runner.invoke(app, ["convert", str(write_schema(INVALID_SCHEMA)), "-m", MODULE])
        assert result.exit_code == 1
        assert "Schema Validation Failed" in result.output

    def test_convert_unresolved_reference(self, write_schema: Callable[..., Path]) -> None:
        """Test that nothing is written for an inconsistent type model."""
        path = write_schema(UNRESOLVED_SCHEMA)
        result = runner.invoke(app, ["convert", str(path), "-m", MODULE])

        assert result.exit_code == 1
        assert "E001" in result.output
        assert not path.with_suffix(".daml").exists()

    def test_convert_cycle(self, write_schema: Callable[..., Path]) -> None:
        """Test that cyclic schemas fail."""
        result = runner.invoke(app, ["convert", str(write_schema(CYCLIC_SCHEMA)), "-m", MODULE])
        assert result.exit_code == 1
        assert "Conversion Failed" in result.output

    def test_convert_strict(self, write_schema: Callable[..., Path]) -> None:
        """Test that --strict turns warnings into failures."""
        path = write_schema(RESERVED_WORD_SCHEMA)
        result = runner.invoke(app, ["convert", str(path), "-m", MODULE, "--strict"])
        assert result.exit_code == 1

    def test_convert_config_file(self, write_schema: Callable[..., Path], tmp_path: Path) -> None:
        """Test that settings are read from a config file."""
        path = write_schema(EMPTY_ENUM_SCHEMA)
        config = tmp_path / "metagen.yaml"
        config.write_text("empty_variant: error\n")

        placeholder = runner.invoke(app, ["convert", str(path), "-m", MODULE, "--dry-run"])
        assert placeholder.exit_code == 0

        failed = runner.invoke(
            app, ["convert", str(path), "-m", MODULE, "--dry-run", "--config", str(config)]
        )
        assert failed.exit_code == 1
        assert "has no alternatives" in failed.output


class TestInfoCommand:
    """Tests for the info command."""

    def test_info_schema(self, full_schema_file: Path) -> None:
        """Test summary of a schema file."""
        result = runner.invoke(app, ["info", str(full_schema_file)])

        assert result.exit_code == 0
        assert "Schema Summary" in result.output
        assert "org.isda.cdm" in result.output
        assert "Classes" in result.output
        assert "1 (function)" in result.output

    def test_info_invalid(self, write_schema: Callable[..., Path]) -> None:
        """Test that unreadable files fail."""
        result = runner.invoke(app, ["info", str(write_schema(INVALID_SCHEMA))])
        assert result.exit_code == 1
