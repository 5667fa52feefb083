"""File logging configuration for jot.

The terminal is in raw alternate-screen mode while the editor runs, so log
records only ever go to a rotating file under the platform log directory.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "jot"
LOGGER_NAME = "jot"
LOG_FILENAME = "jot.log"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    log_path: Path | None = None,
    level: int = logging.INFO,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Attach a rotating file handler to the ``jot`` logger.

    Idempotent: a logger that already has handlers is only re-leveled. When
    the log directory cannot be created or the file cannot be opened, a
    ``NullHandler`` is installed so logging calls stay harmless.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    target = log_path if log_path is not None else DEFAULT_LOG_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            target,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    except OSError:
        handler = logging.NullHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def teardown_logging() -> None:
    """Detach and close every handler installed on the ``jot`` logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the ``jot`` logger or one of its children."""
    base_logger = logging.getLogger(LOGGER_NAME)
    if name:
        return base_logger.getChild(name)
    return base_logger


__all__ = [
    "DEFAULT_LOG_PATH",
    "get_logger",
    "setup_logging",
    "teardown_logging",
]
