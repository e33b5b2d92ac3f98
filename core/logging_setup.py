"""
Logging Setup

Console + daily-rotating file logging for the Taskie client.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from config.settings import (
    LOG_BACKUP_COUNT,
    LOG_CLIENT_FILE,
    LOG_DIR,
    LOG_FALLBACK_DIR,
    LOG_LEVEL,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s | %(name)s"

# Handlers attached by the last setup_logging() call
_installed_handlers: List[logging.Handler] = []


def setup_logging(
    level: str = LOG_LEVEL,
    log_dir: Optional[str] = LOG_DIR,
    console: bool = True,
) -> logging.Logger:
    """
    Setup logging with rotation.

    Logs to console (stderr, so command output on stdout stays clean) and to
    a file rotated at midnight, keeping LOG_BACKUP_COUNT days.

    Calling it again replaces the handlers from the previous call, so
    the root logger never ends up with duplicates.

    Args:
        level: Log level name ("DEBUG", "INFO", ...)
        log_dir: Directory for the log file (None = console only)
        console: Attach the console handler

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    _remove_installed_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        _install(logger, console_handler)

    if log_dir is None:
        return logger

    log_file = Path(log_dir) / LOG_CLIENT_FILE
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = _rotating_handler(log_file)
    except OSError:
        # Fallback to local logs directory if log_dir not writable
        fallback_log = Path(LOG_FALLBACK_DIR) / LOG_CLIENT_FILE
        fallback_log.parent.mkdir(exist_ok=True)
        logger.warning(f"Cannot write to {log_file}, using fallback: {fallback_log}")
        file_handler = _rotating_handler(fallback_log)

    file_handler.setFormatter(formatter)
    _install(logger, file_handler)

    return logger


def _rotating_handler(path: Path) -> logging.handlers.TimedRotatingFileHandler:
    return logging.handlers.TimedRotatingFileHandler(
        str(path),
        when="midnight",
        interval=1,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.addHandler(handler)
    _installed_handlers.append(handler)


def _remove_installed_handlers(logger: logging.Logger) -> None:
    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()
