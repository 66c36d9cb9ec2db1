"""ENVREADER FILE PURPOSE
Purpose: logging setup with strict debug gating.
Hot path: yes (reader calls log on fallback/failure; default is quiet).
Feature flags: ENVREADER_DEBUG.
Failure mode: never crash due to logging.
"""

from __future__ import annotations

import logging

from envreader.config import is_debug

LOGGER_NAME = "envreader"


def _configure() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if is_debug() else logging.WARNING)
    return logger


logger = _configure()


def debug_enabled() -> bool:
    """Re-read ENVREADER_DEBUG; a flag turned on after import lifts the logger to INFO."""
    debug = is_debug()
    if debug and not logger.isEnabledFor(logging.INFO):
        logger.setLevel(logging.INFO)
    return debug
