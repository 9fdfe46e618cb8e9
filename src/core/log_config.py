"""Logging setup for the application. Modules only ever call logging.getLogger(__name__)."""

import logging
import sys
from typing import Optional

from src.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a single stdout handler to the package root logger ('src'). Safe to call more than once."""
    level_name = (level or get_settings().log_level).upper()
    logger = logging.getLogger("src")
    logger.setLevel(getattr(logging, level_name))

    # avoid stacking handlers when the app gets created multiple times (tests)
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
