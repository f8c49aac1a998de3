"""
Summary: Re-export logger setup helpers and the custom Rich handler.
Why: Provide a single canonical import path for applications that opt in.
"""

from __future__ import annotations

from .config import LOGGER_NAME, setup_logger
from .handlers import PathRichHandler

__all__ = [
    "LOGGER_NAME",
    "PathRichHandler",
    "setup_logger",
]
