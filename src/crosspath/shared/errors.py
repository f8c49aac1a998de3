"""
Summary: Error taxonomy for path parsing, classification and comparison.
Why: Let callers tell caller-input validation failures apart by type.
"""

from __future__ import annotations

from typing import Final

_ARTICLES: Final[dict[str, str]] = {
    "absolute": "an",
    "relative": "a",
    "unqualified": "an",
}


def with_article(kind: str) -> str:
    """Return ``kind`` prefixed with its indefinite article (``an absolute``)."""
    return f"{_ARTICLES.get(kind, 'a')} {kind}"


class PathError(ValueError):
    """Base class for all crosspath validation failures."""


class InvalidSeparatorError(PathError):
    """Raised when a separator other than ``/`` or ``\\`` is requested."""

    def __init__(self, separator: str) -> None:
        super().__init__(f"Unsupported path separator {separator!r}; expected '/' or '\\'")
        self.separator: str = separator


class PathKindMismatchError(PathError):
    """Raised when a strict factory receives a path of the wrong kind."""

    def __init__(self, expected: str, actual: str, raw: str | None = None) -> None:
        super().__init__(
            f"Expected to receive {with_article(expected)} path, "
            f"but received {with_article(actual)} path instead"
        )
        self.expected: str = expected
        self.actual: str = actual
        self.raw: str | None = raw


class RootKindMismatchError(PathError):
    """Raised when two absolute paths have different root kinds."""

    def __init__(self, first: str, second: str, first_kind: str, second_kind: str) -> None:
        super().__init__(
            "The two paths being compared are not in the same namespace; "
            f'the first path ("{first}") has root kind "{first_kind}" '
            f'but the second path ("{second}") has root kind "{second_kind}".'
        )
        self.first: str = first
        self.second: str = second
        self.first_kind: str = first_kind
        self.second_kind: str = second_kind


class DriveMismatchError(PathError):
    """Raised when two drive-letter paths are on different drives."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(
            f'The two paths being compared are not on the same drive; comparing "{first}" and "{second}"'
        )
        self.first: str = first
        self.second: str = second


class UNCHostMismatchError(PathError):
    """Raised when two UNC paths point at different hosts."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(
            f'The two paths being compared are not on the same UNC host; comparing "{first}" and "{second}"'
        )
        self.first: str = first
        self.second: str = second


class InvalidRootError(PathError):
    """Raised when root detection runs on a path that is not absolute."""

    def __init__(self, raw: str) -> None:
        super().__init__(f'Cannot determine the root kind of non-absolute path "{raw}"')
        self.raw: str = raw


# Names used by the kind-tagged API documentation.
PathKindError = PathKindMismatchError
RootMismatchError = RootKindMismatchError


__all__ = [
    "DriveMismatchError",
    "InvalidRootError",
    "InvalidSeparatorError",
    "PathError",
    "PathKindError",
    "PathKindMismatchError",
    "RootKindMismatchError",
    "RootMismatchError",
    "UNCHostMismatchError",
    "with_article",
]
