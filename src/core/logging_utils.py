"""Shared logging helpers for the calculator."""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "CALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LOGGER_INITIALISED = False


def _initialise_root(level: str) -> None:
    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGER_INITIALISED = True


def set_log_level(level: str) -> None:
    """Явная смена уровня (флаг --log-level имеет приоритет над env)."""
    _initialise_root(level.upper())
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    _initialise_root(level)
    return logging.getLogger(name or "calculator")
