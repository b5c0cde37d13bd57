"""Logging setup shared by the CLI and the API."""
from __future__ import annotations

import logging

from src.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a single console handler to the package loggers.

    Safe to call more than once; later calls only adjust the level.
    """
    level = (level or settings.log_level).upper()
    for name in ("src", "app"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
