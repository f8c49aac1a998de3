"""
Summary: Cross-platform path values: a segment algebra over POSIX, drive-letter and UNC paths.
Why: Expose the Path value, kind-tagged wrappers and errors from one import.
"""

import logging

from crosspath.features.kinds import (
    AbsolutePath,
    DirectoryLister,
    KindedPath,
    PathKind,
    RelativePath,
    RootKind,
    UnqualifiedPath,
    detect_path_kind,
    detect_root_kind,
)
from crosspath.features.segments import (
    Path,
    PathInput,
    detect_separator,
    is_absolute,
    normalize,
    split_to_segments,
    validate_segments,
)
from crosspath.shared.errors import (
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

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AbsolutePath",
    "DirectoryLister",
    "DriveMismatchError",
    "InvalidRootError",
    "InvalidSeparatorError",
    "KindedPath",
    "Path",
    "PathError",
    "PathInput",
    "PathKind",
    "PathKindError",
    "PathKindMismatchError",
    "RelativePath",
    "RootKind",
    "RootKindMismatchError",
    "RootMismatchError",
    "UNCHostMismatchError",
    "UnqualifiedPath",
    "detect_path_kind",
    "detect_root_kind",
    "detect_separator",
    "is_absolute",
    "normalize",
    "split_to_segments",
    "validate_segments",
]
