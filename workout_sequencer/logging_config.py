from __future__ import annotations

import logging
from typing import Optional

from workout_sequencer.config import get_settings

PACKAGE_LOGGER = "workout_sequencer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.
    Level comes from the argument or Settings.LOG_LEVEL. Safe to call more than once.
    """
    settings = get_settings()
    name = (level or settings.LOG_LEVEL or "INFO").upper()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, name, logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
