"""
Package-wide logging configuration.
"""
from __future__ import annotations

import logging
import os

_CONFIGURED = False
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str = "weather_client") -> logging.Logger:
    global _CONFIGURED
    if not _CONFIGURED:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
        _CONFIGURED = True
    return logging.getLogger(name)
