"""
Centralized logging for the Rotary application.

Key Functions:
    - setup_logger(): Console logging for the GUI process
    - configure_file_logging(): Add a rotating log file in the log directory
    - set_level(): Change the level of the root logger and its handlers
"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rotary.constants import LOG_DIR

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(processName)s - %(message)s"

_current_log_file = None

DEBUG = logging.DEBUG
INFO = logging.INFO


def get_active_log_file() -> str | None:
    """Get the path to the active log file, if file logging is configured."""
    return _current_log_file


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)


def parse_level(level: str | int) -> int:
    """Resolve a level name such as "debug" or a numeric level."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _create_handlers(log_file: str | None = None) -> list[logging.Handler]:
    """Create standard console and optional rotating file handlers."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
            )
        )
    return handlers


def set_level(level: int) -> None:
    """Set logging level for the root logger and all handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        handler.setLevel(level)


def configure_file_logging(
    file_identifier: str | None = None, log_dir: str | Path | None = None, level: int = DEBUG
) -> str | None:
    """Configure console plus rotating file logging. Returns the log file path."""
    global _current_log_file

    if _current_log_file and Path(_current_log_file).exists():
        return _current_log_file

    if file_identifier is None:
        file_identifier = f"rotary_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

    if log_dir is None:
        log_dir = LOG_DIR

    Path(log_dir).mkdir(parents=True, exist_ok=True)
    log_file = str(Path(log_dir) / f"{file_identifier}.log")

    try:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=_create_handlers(log_file),
            force=True,
        )
        _current_log_file = log_file
        logging.info(f"File logging configured to {log_file}")
        return log_file

    except (OSError, PermissionError):
        logging.exception("Error setting up file logging")
        return None


def setup_logger(name: str | None = None, level: int = INFO) -> logging.Logger:
    """Configure console logging and return the named logger."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=_create_handlers(_current_log_file),
        force=True,
    )

    logger = get_logger(name)
    logger.info(f"Logger configured for {name or 'unnamed component'}")
    return logger
