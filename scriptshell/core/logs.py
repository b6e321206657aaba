# scriptshell/core/logs.py
"""Root logger setup for the desktop shell (rotating file + console)."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from scriptshell.core import config

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_BYTES = 1024 * 1024
BACKUP_COUNT = 3


def configure_logging(level: str | None = None) -> Path:
    """
    Attach a rotating file handler and a console handler to the root logger.

    Safe to call more than once: handlers are only added the first time.
    Returns the path of the log file.
    """
    config.ensure_dirs()
    log_path = config.log_dir() / config.LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(level or config.log_level())

    formatter = logging.Formatter(FORMAT)

    # Avoid adding duplicate handlers if called again
    if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)

    return log_path
