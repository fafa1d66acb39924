"""Unit tests for the application logger."""

import logging

import pytest

from doomfire.logger_setup import setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("doomfire")
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_setup_logging_is_idempotent(restore_logger):
    """Test that repeated setup leaves one handler on a private logger."""
    logger = setup_logging("DEBUG")
    setup_logging("DEBUG")
    assert logger is restore_logger
    assert len(logger.handlers) == 1
    assert not logger.propagate
    assert logger.level == logging.DEBUG
