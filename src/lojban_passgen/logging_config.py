"""
Logging configuration for the Lojban password generator.

Generated passwords are written to stdout, so every log record goes to
stderr, optionally mirrored to a file chosen with ``--log-file``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "lojban_passgen"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _resolve_level(level: str) -> int:
    """Translate a level name; unknown names fall back to WARNING."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    verbose: bool = False,
) -> logging.Logger:
    """Configure the package logger.

    Calling this again replaces (and closes) the handlers installed by
    the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives a copy of every record
        verbose: Use timestamps and logger names on stderr as well

    Returns:
        The configured ``lojban_passgen`` logger

    Raises:
        OSError: If ``log_file`` cannot be opened for appending
    """
    logger = logging.getLogger(LOGGER_NAME)
    _reset_handlers(logger)

    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(DETAILED_FORMAT if verbose else CONSOLE_FORMAT))
    handlers = [console]

    if log_file:
        mirror = logging.FileHandler(log_file, encoding="utf-8")
        mirror.setFormatter(logging.Formatter(DETAILED_FORMAT))
        handlers.append(mirror)

    for handler in handlers:
        handler.setLevel(log_level)
        logger.addHandler(handler)

    # stderr output is complete; records must not reach root handlers too
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or its ``name`` child."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)
