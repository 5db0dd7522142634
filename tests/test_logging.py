"""Unit tests for routing the package's log records to the console."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from task_constructor_utils.io.logging import configure_logging, logger


@pytest.fixture
def restore_logger() -> Iterator[None]:
    """Restore the package logger's handlers and level after a test."""
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.usefixtures("restore_logger")
def test_configure_logging_adds_single_rich_handler() -> None:
    """Verify that repeated configuration neither duplicates handlers nor ignores the new level."""
    # Act
    configure_logging(logging.DEBUG)
    configure_logging("WARNING")

    # Assert
    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert logger.level == logging.WARNING
