"""
Summary: Export kind-tagged path types, classifiers and the listing port.
Why: Provide a stable import surface for adapters and tests.
"""

from .domain.classification import PathKind, RootKind, detect_path_kind, detect_root_kind
from .domain.kinded import AbsolutePath, KindedPath, RelativePath, UnqualifiedPath
from .usecases.ports import DirectoryLister

__all__ = [
    "AbsolutePath",
    "DirectoryLister",
    "KindedPath",
    "PathKind",
    "RelativePath",
    "RootKind",
    "UnqualifiedPath",
    "detect_path_kind",
    "detect_root_kind",
]
