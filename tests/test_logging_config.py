"""Tests for logging configuration."""

import logging
from collections.abc import Iterator
from io import StringIO

import pytest
from cdm_metagen.logging_config import ROOT_LOGGER, get_logger, setup_logging
from rich.console import Console
from rich.logging import RichHandler


@pytest.fixture
def restore_package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger state after a test."""
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_name(self) -> None:
        """Loggers live below the package logger."""
        assert get_logger("custom").name == "cdm_metagen.custom"

    def test_keeps_package_names(self) -> None:
        """Module names are not prefixed twice."""
        assert get_logger("cdm_metagen.render.daml").name == "cdm_metagen.render.daml"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_installs_rich_handler(self, restore_package_logger: logging.Logger) -> None:
        """A single Rich handler is installed at the requested level."""
        setup_logging("debug")
        setup_logging("INFO")

        assert restore_package_logger.level == logging.INFO
        assert len(restore_package_logger.handlers) == 1
        assert isinstance(restore_package_logger.handlers[0], RichHandler)
        assert restore_package_logger.propagate is False

    def test_writes_to_console(self, restore_package_logger: logging.Logger) -> None:
        """Messages go to the given console with the logger name."""
        output = StringIO()
        setup_logging("WARNING", console=Console(file=output, width=200))

        get_logger("test").warning("Base class %s is not declared", "Missing")
        get_logger("test").info("hidden")

        text = output.getvalue()
        assert "cdm_metagen.test: Base class Missing is not declared" in text
        assert "hidden" not in text
