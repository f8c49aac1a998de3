"""
Summary: Opt-in wiring of console and rotating-file handlers onto the ``crosspath`` logger.
Why: The library itself only installs a NullHandler; applications call setup_logger().
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from crosspath.config.settings import LOG_KEEP_SEGMENTS, LOG_LEVEL

from .handlers import PathRichHandler

LOGGER_NAME: Final[str] = "crosspath"
FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 5


def _console_handler(console: Console | None, level: int) -> PathRichHandler:
    handler = PathRichHandler(
        console=console or Console(stderr=True, soft_wrap=True),
        keep_segments=LOG_KEEP_SEGMENTS,
    )
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> RotatingFileHandler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = LOG_LEVEL,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Replace the ``crosspath`` logger's handlers with a Rich console handler.

    Args:
        log_file: Optional file that also receives records, rotated at 10 MiB.
        console_level: Threshold for the console; defaults to the configured ``log_level``.
        file_level: Threshold for ``log_file``.
        console: Rich console to render to; stderr when omitted.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(console, console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))
    return logger


__all__ = ["LOGGER_NAME", "setup_logger"]
