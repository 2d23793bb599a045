"""Logging configuration for cdm-metagen."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "cdm_metagen"


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Configure the package logger.

    Args:
    ----
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console: Rich console to log to, stderr by default.

    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper()))

    root_logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger.

    Args:
    ----
        name: Logger name (typically __name__).

    Returns:
    -------
        Logger instance.

    """
    if name.startswith(ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
