# wsdl-structure-analyzer/backend/wsdl_analyzer/logging_utils.py
"""Logging helpers for the analyzer service."""

import logging
from typing import Optional

from . import config

_CONFIGURED = False


def setup_logging(level_name: Optional[str] = None) -> int:
    """Attach a single stream handler to the package logger. Safe to call twice."""
    global _CONFIGURED
    level = getattr(logging, (level_name or config.LOG_LEVEL).upper(), logging.INFO)
    logger = logging.getLogger("wsdl_analyzer")
    logger.setLevel(level)
    if _CONFIGURED:
        return level

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    logger.addHandler(handler)

    _CONFIGURED = True
    logger.info("Logging initialized at %s", logging.getLevelName(level))
    return level
