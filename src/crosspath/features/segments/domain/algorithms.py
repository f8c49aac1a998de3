"""
Summary: Pure segment-sequence algorithms behind the Path value type.
Why: Keep normalization, relativization and search logic testable without Path instances.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

CURRENT: Final[str] = "."
PARENT: Final[str] = ".."

DRIVE_ROOT_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:$")

# ``\\host`` occupies index 2 after the two empty UNC prefix segments.
UNC_HOST_INDEX: Final[int] = 2
UNC_PREFIX_SEGMENTS: Final[tuple[str, str]] = ("", "")


def is_root_marker(segments: Sequence[str], index: int) -> bool:
    """Return True when ``segments[index]`` anchors the path to a root.

    Root markers are the empty leading segments (POSIX root, UNC prefix), an
    exact drive letter in the first position, and the host right after a UNC
    prefix.
    """
    segment = segments[index]
    if segment == "":
        return True
    if index == 0:
        return DRIVE_ROOT_PATTERN.match(segment) is not None
    return index == UNC_HOST_INDEX and segments[0] == "" and segments[1] == ""


def normalize_segments(segments: Sequence[str]) -> list[str]:
    """Resolve ``.`` and ``..`` lexically, left to right.

    Leading ``.``/``..`` runs are kept because there is no known root to climb
    past. A ``..`` directly after a root marker is dropped.
    """
    result: list[str] = []
    for segment in segments:
        if segment == CURRENT:
            if not result:
                result.append(segment)
        elif segment == PARENT:
            if not result or result[-1] == PARENT:
                result.append(segment)
            elif result[-1] == CURRENT:
                result[-1] = PARENT
            elif is_root_marker(result, len(result) - 1):
                continue
            else:
                _ = result.pop()
        else:
            result.append(segment)
    return result


def shared_prefix_length(first: Sequence[str], second: Sequence[str]) -> int:
    """Count the leading positions where both sequences hold equal segments."""
    count = 0
    for left, right in zip(first, second):
        if left != right:
            break
        count += 1
    return count


def relative_segments(
    own: Sequence[str],
    directory: Sequence[str],
    *,
    leading_dot: bool = True,
) -> list[str]:
    """Express ``own`` relative to ``directory``.

    The shared positional prefix is removed from both sides. When
    ``directory`` is exhausted the remainder of ``own`` is returned, prefixed
    with ``.`` if ``leading_dot``; otherwise one ``..`` is emitted per
    remaining directory segment, followed by the remainder of ``own``.
    """
    shared = shared_prefix_length(own, directory)
    remaining_own = list(own[shared:])
    remaining_dir = directory[shared:]

    if not remaining_dir:
        return [CURRENT, *remaining_own] if leading_dot else remaining_own
    return [PARENT] * len(remaining_dir) + remaining_own


def index_of_segments(
    haystack: Sequence[str],
    needle: Sequence[str],
    from_index: int = 0,
) -> int:
    """Return the first index where ``needle`` matches ``haystack`` exactly, or -1.

    Matches align on segment boundaries only. Negative ``from_index`` values
    count from the end. Like ``str.find``, an empty needle matches at
    ``from_index`` while that index is within bounds.
    """
    width = len(needle)
    if from_index < 0:
        from_index = max(len(haystack) + from_index, 0)
    if width == 0:
        return from_index if from_index <= len(haystack) else -1

    needle = list(needle)
    for index in range(from_index, len(haystack) - width + 1):
        if list(haystack[index : index + width]) == needle:
            return index
    return -1


def splice_segments(
    segments: Sequence[str],
    index: int,
    width: int,
    replacement: Sequence[str],
) -> list[str]:
    """Replace ``width`` segments starting at ``index`` with ``replacement``."""
    return [*segments[:index], *replacement, *segments[index + width :]]


def starts_with_segments(segments: Sequence[str], prefix: Sequence[str]) -> bool:
    if len(prefix) > len(segments):
        return False
    return list(segments[: len(prefix)]) == list(prefix)


def ends_with_segments(segments: Sequence[str], suffix: Sequence[str]) -> bool:
    if len(suffix) > len(segments):
        return False
    if not suffix:
        return True
    return list(segments[-len(suffix) :]) == list(suffix)


__all__ = [
    "CURRENT",
    "DRIVE_ROOT_PATTERN",
    "PARENT",
    "UNC_HOST_INDEX",
    "UNC_PREFIX_SEGMENTS",
    "ends_with_segments",
    "index_of_segments",
    "is_root_marker",
    "normalize_segments",
    "relative_segments",
    "shared_prefix_length",
    "splice_segments",
    "starts_with_segments",
]
