"""Logging configuration helpers."""

import logging
from typing import Optional, Union

from fitsynth.config import get_settings

LOGGER_NAME = "fitsynth"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call repeatedly; only the level is updated on later calls.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if level is None:
        level = get_settings().log_level
    logger.setLevel(level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
