"""
Summary: Immutable segment-sequence path value with separator-aware rendering.
Why: Give POSIX, drive-letter and UNC paths one algebra that round-trips to strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Final, Self, TypeAlias

from crosspath.shared.errors import InvalidSeparatorError

from .algorithms import (
    DRIVE_ROOT_PATTERN,
    UNC_PREFIX_SEGMENTS,
    ends_with_segments,
    index_of_segments,
    normalize_segments,
    relative_segments,
    splice_segments,
    starts_with_segments,
)
from .separators import DEFAULT_SEPARATOR, SEPARATORS, detect_separator, split_to_segments

PathInput: TypeAlias = "str | Path | Iterable[PathInput]"

DRIVE_PREFIX_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:")


def _flatten(inputs: Iterable[Any], parts: list[str], hints: list[str]) -> None:
    # ``parts`` feeds the splitter; ``hints`` feeds separator detection,
    # where a Path operand stands in with its own separator.
    for item in inputs:
        if isinstance(item, str):
            parts.append(item)
            hints.append(item)
        elif isinstance(item, Path):
            parts.extend(item.segments)
            hints.append(item.separator)
        elif isinstance(item, Iterable):
            _flatten(item, parts, hints)
        else:
            raise TypeError(f"Cannot build a path from {type(item).__name__!r}")


def _check_separator(separator: str) -> str:
    if separator not in SEPARATORS:
        raise InvalidSeparatorError(separator)
    return separator


def _insertable(path: Path) -> tuple[str, ...]:
    # An empty string parses to the root marker ``("",)``; as a replacement
    # it means "delete".
    return () if path.segments == ("",) else path.segments


class Path:
    """An immutable filesystem path made of segments and a separator.

    For ``/tmp/foo.txt`` the segments are ``("", "tmp", "foo.txt")``; for
    ``C:\\something\\somewhere.txt`` they are ``("C:", "something", "somewhere.txt")``
    and for ``\\\\SERVER\\Share`` they are ``("", "", "SERVER", "Share")``.

    Every operation returns a new instance of the receiver's class.
    """

    __slots__ = ("_segments", "_separator")

    _segments: tuple[str, ...]
    _separator: str

    detect_separator = staticmethod(detect_separator)

    def __init__(self, *inputs: PathInput, separator: str | None = None) -> None:
        parts: list[str] = []
        hints: list[str] = []
        _flatten(inputs, parts, hints)

        if separator is None:
            resolved = detect_separator(hints, DEFAULT_SEPARATOR)
        else:
            resolved = _check_separator(separator)

        object.__setattr__(self, "_segments", tuple(split_to_segments(parts, resolved)))
        object.__setattr__(self, "_separator", resolved)

    # Construction -----------------------------------------------------------

    @classmethod
    def _build(cls, segments: Iterable[str], separator: str) -> Self:
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_segments", tuple(segments))
        object.__setattr__(instance, "_separator", separator)
        return instance

    @classmethod
    def from_segments(cls, segments: Sequence[str], separator: str | None = None) -> Self:
        """Create a path from segments, filtering stray empty entries.

        Args:
            segments: Segment list, possibly containing empty strings.
            separator: Explicit separator; detected from ``segments`` when omitted.
        """
        if separator is None:
            separator = detect_separator(segments, DEFAULT_SEPARATOR)
        else:
            separator = _check_separator(separator)
        return cls._build(split_to_segments(list(segments), separator), separator)

    @classmethod
    def from_raw(cls, segments: Sequence[str], separator: str) -> Self:
        """Create a path from segments exactly as given.

        No validation happens, so this can build a path that breaks the
        empty-segment invariant. Prefer ``from_segments``.
        """
        return cls._build(segments, separator)

    @classmethod
    def split_to_segments(cls, value: str | Sequence[str]) -> list[str]:
        return split_to_segments(value)

    @staticmethod
    def is_path(value: object) -> bool:
        """Return whether ``value`` is a Path (subclasses included)."""
        return isinstance(value, Path)

    def _coerce(self, value: PathInput) -> Path:
        if isinstance(value, Path):
            return value
        return type(self)(value)

    # Value semantics --------------------------------------------------------

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    @property
    def separator(self) -> str:
        return self._separator

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self).from_raw, (self._segments, self._separator))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._separator == other._separator and self._segments == other._segments

    def __hash__(self) -> int:
        return hash((self._segments, self._separator))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()

    def __fspath__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __truediv__(self, other: PathInput) -> Self:
        return self.concat(other)

    # Algorithms -------------------------------------------------------------

    def normalize(self) -> Self:
        """Resolve all non-leading ``.`` and ``..`` segments lexically."""
        return type(self).from_raw(normalize_segments(self._segments), self._separator)

    def concat(self, *others: PathInput) -> Self:
        """Append the segments of ``others``; the result keeps this path's separator."""
        other_segments = type(self)(*others).segments
        return type(self).from_segments(
            [*self._segments, *other_segments],
            self._separator,
        )

    def is_absolute(self) -> bool:
        """Return whether the path starts with a separator, UNC prefix or drive letter."""
        if not self._segments:
            return False
        first = self._segments[0]
        # Empty first segment: POSIX root or UNC prefix.
        if first == "":
            return True
        return DRIVE_PREFIX_PATTERN.match(first) is not None

    def clone(self) -> Self:
        return type(self).from_raw(list(self._segments), self._separator)

    def relative_to(self, directory: PathInput, *, no_leading_dot: bool = False) -> Self:
        """Express this path relative to ``directory``.

        Args:
            directory: The directory the result should be relative to.
            no_leading_dot: Omit the leading ``.`` when this path lies below ``directory``.

        Returns:
            A new path made of ``..`` climbs followed by the remaining segments.
        """
        base = self._coerce(directory)
        segments = relative_segments(
            self._segments,
            base.segments,
            leading_dot=not no_leading_dot,
        )
        return type(self).from_segments(segments, self._separator)

    def to_string(self) -> str:
        """Join the segments with the separator.

        An empty result renders as ``/``, a bare UNC prefix as ``\\\\`` and a
        bare drive (``C:``) gets the separator appended.
        """
        if self._segments == UNC_PREFIX_SEGMENTS:
            return self._separator * len(UNC_PREFIX_SEGMENTS)
        result = self._separator.join(self._segments)
        if result == "":
            return "/"
        if DRIVE_ROOT_PATTERN.match(result):
            return result + self._separator
        return result

    def basename(self) -> str:
        """Return the final segment, or ``""`` for an empty path."""
        return self._segments[-1] if self._segments else ""

    def extname(self, *, full: bool = False) -> str:
        """Return the trailing extension of the basename.

        Set ``full`` to get a compound extension such as ``.d.ts``.
        """
        parts = self.basename().split(".")
        if len(parts) == 1:
            return ""
        if full:
            return "." + ".".join(parts[1:])
        return "." + parts[-1]

    def dirname(self) -> Self:
        """Return the path without its final segment."""
        return self.replace_last([])

    def starts_with(self, value: PathInput) -> bool:
        """Return whether the leading segments exactly match ``value``'s segments.

        ``/home/user/.config2`` does not start with ``/home/user/.config``.
        """
        return starts_with_segments(self._segments, self._coerce(value).segments)

    def ends_with(self, value: PathInput) -> bool:
        """Return whether the trailing segments exactly match ``value``'s segments."""
        return ends_with_segments(self._segments, self._coerce(value).segments)

    def index_of(self, value: PathInput, from_index: int = 0) -> int:
        """Return the segment index where ``value`` first appears, or ``-1``.

        Args:
            value: Segments to search for; the index of its first segment is returned.
            from_index: Segment index to begin searching at.
        """
        return index_of_segments(self._segments, self._coerce(value).segments, from_index)

    def includes(self, value: PathInput, from_index: int = 0) -> bool:
        return self.index_of(value, from_index) != -1

    def replace(self, value: PathInput, replacement: PathInput) -> Self:
        """Replace the first occurrence of ``value``'s segments.

        Pass ``""`` or an empty list as ``replacement`` to remove the
        segments. A clone is returned when ``value`` does not occur or has no
        segments.
        """
        needle = self._coerce(value)
        if not needle.segments:
            return self.clone()
        index = self.index_of(needle)
        if index == -1:
            return self.clone()
        return type(self).from_segments(
            splice_segments(self._segments, index, len(needle.segments), _insertable(self._coerce(replacement))),
            self._separator,
        )

    def replace_all(self, value: PathInput, replacement: PathInput) -> Self:
        """Replace every occurrence of ``value``'s segments.

        Searching resumes after each inserted replacement, so a replacement
        that contains ``value`` is never expanded again.
        """
        needle = self._coerce(value)
        substitute = _insertable(self._coerce(replacement))
        width = len(needle.segments)
        if width == 0:
            return self.clone()

        current = self.clone()
        cursor = 0
        while True:
            index = current.index_of(needle, cursor)
            if index == -1:
                return current
            previous_length = len(current.segments)
            current = type(self).from_segments(
                splice_segments(current.segments, index, width, substitute),
                self._separator,
            )
            # Measure the inserted width after validation dropped any empties.
            cursor = index + width + len(current.segments) - previous_length

    def replace_last(self, replacement: PathInput) -> Self:
        """Return a copy whose final segment is swapped for ``replacement``'s segments."""
        substitute = _insertable(self._coerce(replacement))
        return type(self).from_segments(
            [*self._segments[:-1], *substitute],
            self._separator,
        )

    def equals(self, other: PathInput) -> bool:
        """Return whether ``other`` has the same separator and segments."""
        candidate = self._coerce(other)
        return candidate.separator == self._separator and self.has_equal_segments(candidate)

    def has_equal_segments(self, other: PathInput) -> bool:
        """Return whether ``other`` has the same segments; the separator is ignored."""
        return self._segments == self._coerce(other).segments


def normalize(*inputs: PathInput) -> Path:
    """Concatenate ``inputs`` and resolve all non-leading ``.`` and ``..`` segments."""
    return Path(*inputs).normalize()


def is_absolute(value: PathInput) -> bool:
    """Return whether ``value`` starts with ``/``, ``\\`` or a drive letter."""
    if isinstance(value, Path):
        return value.is_absolute()
    return Path(value).is_absolute()


__all__ = ["DRIVE_PREFIX_PATTERN", "Path", "PathInput", "is_absolute", "normalize"]
