"""Define utility functions to simplify logging to the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("task_constructor_utils")
console = Console()


def configure_logging(level: int | str = logging.INFO) -> None:
    """Route the package's log records through a rich console handler.

    :param level: Minimum level of records emitted by the package logger
    """
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(level)


def log_debug(message: str) -> None:
    """Log the given string at debug level."""
    logger.debug(message)


def log_info(message: str) -> None:
    """Log the given string at info level."""
    logger.info(message)


def log_warning(message: str) -> None:
    """Log the given string at warning level."""
    logger.warning(message)
