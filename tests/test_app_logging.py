"""Tests for logging configuration."""

import logging

from dining_planner.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("dining_planner")
    logger.handlers.clear()

    configure_logging()
    configure_logging()

    assert len(logger.handlers) == 1
    assert logger.propagate is False
    assert logger.level == logging.INFO


def test_configure_logging_debug_level() -> None:
    configure_logging(debug=True)

    assert logging.getLogger("dining_planner").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging()
    assert logging.getLogger("dining_planner").level == logging.INFO
