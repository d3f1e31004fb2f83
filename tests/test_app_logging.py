"""Tests for logging configuration."""

import logging

from food_lookup.app_logging import configure_logging
from food_lookup.config import Settings


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("food_lookup")
    logger.handlers.clear()

    configure_logging(Settings())
    first_count = len(logger.handlers)

    configure_logging(Settings())
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_debug_level() -> None:
    logger = logging.getLogger("food_lookup")

    configure_logging(Settings(debug=True))
    debug_level = logger.level
    configure_logging(Settings())

    assert debug_level == logging.DEBUG
    assert logger.level == logging.INFO


def test_configure_logging_uses_level_and_format_from_settings() -> None:
    logger = logging.getLogger("food_lookup")

    configure_logging(Settings(log_level="warning", log_format="%(message)s"))
    level = logger.level
    record = logging.LogRecord(
        "food_lookup", logging.WARNING, __file__, 1, "hi", None, None
    )
    rendered = [handler.format(record) for handler in logger.handlers]
    configure_logging(Settings())

    assert level == logging.WARNING
    assert rendered == ["hi"]
