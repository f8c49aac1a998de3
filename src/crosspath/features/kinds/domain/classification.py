"""
Summary: Classify raw path strings by kind and by root grammar.
Why: Kind-tagged paths and relativization need to know which grammar a string uses.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Final

from crosspath.features.segments.domain.separators import detect_separator, split_raw
from crosspath.shared.errors import InvalidRootError

logger = logging.getLogger(__name__)

DRIVE_LETTER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:")
UNC_PREFIX: Final[str] = "\\\\"


class PathKind(str, Enum):
    """Whether a path is anchored to a root, to ``.``/``..``, or to nothing."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    UNQUALIFIED = "unqualified"

    @property
    def article(self) -> str:
        return "a" if self is PathKind.RELATIVE else "an"


class RootKind(str, Enum):
    """Prefix grammar of an absolute path."""

    LEADING_SLASH = "leading-slash"
    LETTER_DRIVE = "letter-drive"
    UNC = "unc"


def detect_path_kind(raw: str) -> PathKind:
    """Classify ``raw`` as absolute, relative or unqualified.

    Absolute strings start with their own separator, with ``\\\\``, or with a
    drive letter. Relative strings have ``.`` or ``..`` as first segment.
    """
    separator = detect_separator(raw, "/")
    if raw.startswith(separator) or raw.startswith(UNC_PREFIX) or DRIVE_LETTER_PATTERN.match(raw):
        return PathKind.ABSOLUTE

    first_segment = split_raw(raw)[0]
    if first_segment in (".", ".."):
        return PathKind.RELATIVE

    return PathKind.UNQUALIFIED


def detect_root_kind(raw: str) -> RootKind:
    """Return the root grammar of the absolute path ``raw``.

    Raises:
        InvalidRootError: If ``raw`` is not absolute.
    """
    if DRIVE_LETTER_PATTERN.match(raw):
        return RootKind.LETTER_DRIVE
    if raw.startswith(UNC_PREFIX):
        return RootKind.UNC
    if raw.startswith(detect_separator(raw, "/")):
        return RootKind.LEADING_SLASH

    logger.debug("Root kind requested for non-absolute path %r", raw)
    raise InvalidRootError(raw)


def drive_letter(raw: str) -> str | None:
    """Return the ``X:`` prefix of ``raw``, if it has one."""
    match = DRIVE_LETTER_PATTERN.match(raw)
    return match.group(0) if match else None


def unc_host(raw: str) -> str | None:
    """Return the host of a ``\\\\host\\share`` path, if ``raw`` is UNC."""
    if not raw.startswith(UNC_PREFIX):
        return None
    pieces = split_raw(raw[len(UNC_PREFIX) :])
    return pieces[0]


__all__ = [
    "DRIVE_LETTER_PATTERN",
    "PathKind",
    "RootKind",
    "UNC_PREFIX",
    "detect_path_kind",
    "detect_root_kind",
    "drive_letter",
    "unc_host",
]
