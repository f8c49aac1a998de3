"""
Summary: Detect path separators and split path strings into validated segments.
Why: Reconcile POSIX, drive-letter and UNC grammars into one segment model.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final, TypeVar

SEPARATORS: Final[tuple[str, str]] = ("/", "\\")
DEFAULT_SEPARATOR: Final[str] = "/"

# Both separators are always split points so mixed input is accepted.
SPLIT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[/\\]")

# Joins sequence members before scanning; never a separator itself.
_SCAN_JOINER: Final[str] = "|"

_Fallback = TypeVar("_Fallback")


def detect_separator(value: str | Sequence[str], fallback: _Fallback) -> str | _Fallback:
    """Return the first separator character found in ``value``.

    Args:
        value: A path string or a sequence of path strings.
        fallback: Returned unchanged when no separator is present.

    Returns:
        ``"/"`` or ``"\\"``, whichever occurs first, else ``fallback``.
    """
    text = value if isinstance(value, str) else _SCAN_JOINER.join(value)
    for char in text:
        if char in SEPARATORS:
            return char
    return fallback


def validate_segments(segments: Sequence[str], separator: str) -> list[str]:
    """Drop empty segments, keeping the root markers.

    Index 0 may always be empty (leading separator). Index 1 may be empty as
    well when the separator is a backslash and index 0 is empty (UNC prefix).
    """
    unc_allowed = separator == "\\" and len(segments) > 1 and segments[0] == ""
    kept: list[str] = []
    for index, segment in enumerate(segments):
        if segment:
            kept.append(segment)
        elif index == 0 or (index == 1 and unc_allowed):
            kept.append(segment)
    return kept


def split_raw(value: str | Sequence[str]) -> list[str]:
    """Split every string on both separators and flatten, without filtering."""
    parts = [value] if isinstance(value, str) else list(value)
    pieces: list[str] = []
    for part in parts:
        pieces.extend(SPLIT_PATTERN.split(part))
    return pieces


def split_to_segments(value: str | Sequence[str], separator: str | None = None) -> list[str]:
    """Split one or more path strings into a validated segment list.

    >>> split_to_segments("/who//tf//keeps putting/double/slashes/")
    ['', 'who', 'tf', 'keeps putting', 'double', 'slashes']
    """
    if separator is None:
        separator = detect_separator(value, DEFAULT_SEPARATOR)
    return validate_segments(split_raw(value), separator)


__all__ = [
    "DEFAULT_SEPARATOR",
    "SEPARATORS",
    "SPLIT_PATTERN",
    "detect_separator",
    "split_raw",
    "split_to_segments",
    "validate_segments",
]
