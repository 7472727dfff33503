"""
Logging setup for zapqr.

Usage:
    from zapqr.utils.logging_config import setup_logging

    setup_logging("DEBUG", log_file=Path("~/zapqr.log").expanduser())
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "zapqr"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_BYTES = 1 * 1024 * 1024
BACKUP_COUNT = 3


def setup_logging(level: str | int = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """
    Configure the package logger with a console handler and, optionally,
    a rotating file handler. Calling it again only updates the level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    logger.propagate = False
    return logger
