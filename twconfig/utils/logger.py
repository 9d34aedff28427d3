"""Logging setup for the twconfig CLI.

Handlers are attached to the ``twconfig`` package logger rather than the root
logger, so libraries used underneath (chardet, asyncio) keep their own
configuration and an embedding application's logging is left alone.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import IO, Optional

PACKAGE_LOGGER = "twconfig"
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LEVEL_COLORS = {
    logging.DEBUG: '\033[36m',
    logging.INFO: '\033[32m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[35m',
}
RESET = '\033[0m'


class LevelColorFormatter(logging.Formatter):
    """Colour each console line by its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        return f"{color}{message}{RESET}" if color else message


def _is_terminal(stream: IO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def console_handler(stream: Optional[IO] = None, log_format: str = DEFAULT_LOG_FORMAT) -> logging.Handler:
    """Stream handler on stderr; escape codes only when writing to a terminal."""
    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    formatter_cls = LevelColorFormatter if _is_terminal(stream) else logging.Formatter
    handler.setFormatter(formatter_cls(log_format))
    return handler


def file_handler(log_file: Path, log_format: str = DEFAULT_LOG_FORMAT) -> logging.FileHandler:
    """
    Plain-text handler writing to ``log_file`` with a timestamp appended to its stem.

    Raises:
        OSError: If the log directory or file cannot be created
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    handler = logging.FileHandler(
        log_file.with_name(f"{log_file.stem}_{timestamp}{log_file.suffix}"), encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(log_format))
    return handler


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str = "INFO",
    log_format: Optional[str] = None,
    log_file: Optional[Path] = None,
    stream: Optional[IO] = None
) -> logging.Logger:
    """
    Configure the ``twconfig`` package logger and return the named logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        name: Name of the logger to return (a ``twconfig.*`` child or the package logger)
        level: The logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Optional custom log format
        log_file: Optional path to log file; a timestamp is appended to its stem
        stream: Console stream, stderr by default

    Returns:
        logging.Logger: Configured logger instance
    """
    log_format = log_format or DEFAULT_LOG_FORMAT
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.addHandler(console_handler(stream, log_format))
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False

    if log_file:
        try:
            handler = file_handler(log_file, log_format)
        except OSError as e:
            package_logger.error(f"Failed to set up file logging: {str(e)}")
        else:
            package_logger.addHandler(handler)
            package_logger.info(f"Logging to file: {handler.baseFilename}")

    return logging.getLogger(name)
