"""
Centralized error handling and logging.

This module provides:
- The project logger (console output always, file output on demand)
- Custom exception types for the tool's error categories
- A helper to log errors with context
"""
import logging
import traceback
from pathlib import Path
from typing import Optional, Union
from datetime import datetime

LOGGER_NAME = "modtools"

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Configure logger
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.DEBUG)

# Prevent duplicate handlers
if not logger.handlers:
    # Console handler for warnings/errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)
else:
    console_handler = next(
        (h for h in logger.handlers if type(h) is logging.StreamHandler),
        logger.handlers[0],
    )


class ModToolError(Exception):
    """Base exception for tool-specific errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class DataIntegrityError(ModToolError):
    """Static game data contradicts itself (duplicate ids, shared aliases)."""
    pass


class ConfigError(ModToolError):
    """Configuration file could not be read or is invalid."""
    pass


def set_console_level(level: Union[int, str]) -> None:
    """Set the threshold for messages printed to the console."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ConfigError(f"Unknown log level: {level!r}")
        level = resolved
    console_handler.setLevel(level)


def enable_file_logging(log_dir: Union[str, Path]) -> Path:
    """
    Add a detailed file handler writing to log_dir/modtools_YYYYMMDD.log.

    Calling it again for the same file is a no-op. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / f"{LOGGER_NAME}_{datetime.now().strftime('%Y%m%d')}.log").resolve()

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_file:
            return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)
    return log_file


def disable_file_logging() -> None:
    """Detach and close every file handler on the project logger."""
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()


def log_error(error: Exception, context: str = "") -> None:
    """
    Log an error with context information.

    Args:
        error: The exception that occurred
        context: Where the error occurred (e.g., "load_config", "build_registry")
    """
    error_type = type(error).__name__
    error_msg = str(error)
    trace = traceback.format_exc()

    logger.error(
        f"Error in {context}: {error_type}: {error_msg}\n{trace}",
        exc_info=True
    )
