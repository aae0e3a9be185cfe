"""
Logger setup for algstruct.

The library only emits DEBUG records describing reductions (fraction
simplification, polynomial long division, coset normalization).  Loggers
default to WARNING; ALGSTRUCT_LOG_LEVEL accepts a level name ("debug") or a
number ("10").
"""

import logging
import os
from typing import Optional

from .constants import LOG_FORMAT, LOG_LEVEL_ENV


def level_from_env(default: int = logging.WARNING) -> int:
    """Level requested through ALGSTRUCT_LOG_LEVEL, or default if unset or unknown."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Logger for an algstruct module.

    The stream handler is attached once per name, so module-level calls are
    safe on re-import.  An explicit level wins over the environment.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level_from_env() if level is None else level)
    return logger
