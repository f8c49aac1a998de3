"""
Summary: Provide a concise import surface for cross-cutting errors.
Why: Both the segment and kind layers raise these without importing each other.
"""

from .errors import (
    DriveMismatchError,
    InvalidRootError,
    InvalidSeparatorError,
    PathError,
    PathKindError,
    PathKindMismatchError,
    RootKindMismatchError,
    RootMismatchError,
    UNCHostMismatchError,
)

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
]
