"""Logging configuration helpers."""

import logging

from food_lookup.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure engine logging from settings with a single stream handler.

    ``debug`` forces DEBUG regardless of ``log_level``. Calling this again only
    updates the level and the format of the existing handler.
    """
    logger = logging.getLogger("food_lookup")
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logger.setLevel(level)
    formatter = logging.Formatter(settings.log_format)
    if logger.handlers:
        for handler in logger.handlers:
            handler.setFormatter(formatter)
        return
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
