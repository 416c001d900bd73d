"""Tests for logging configuration."""

import logging

from fitness_tracker.app_logging import LOGGER_NAME, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configured = configure_logging()
    configure_logging(logging.DEBUG)

    assert configured is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert not logger.propagate


def test_service_loggers_inherit_package_handler() -> None:
    configure_logging()

    child = logging.getLogger("fitness_tracker.services.meals")

    assert child.getEffectiveLevel() <= logging.INFO
    assert child.parent is not None
    assert child.parent.name.startswith(LOGGER_NAME)
