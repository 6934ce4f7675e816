"""
Logging setup for the file store.

Usage:
    from filestore.core.logging import setup_logging, get_logger
    setup_logging()
    logger = get_logger(__name__)
"""
from __future__ import annotations
import logging
import sys
from typing import Optional

from filestore.core.config import settings

ROOT_LOGGER = "filestore"
HANDLER_NAME = "filestore.stdout"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just update the level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel((level or settings.log_level).upper())

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    return logger

def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)
