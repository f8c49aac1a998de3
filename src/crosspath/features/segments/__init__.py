"""
Summary: Export the segment-model Path value and its splitting helpers.
Why: Provide a stable import surface for the kind layer, adapters and tests.
"""

from .domain.algorithms import normalize_segments, relative_segments
from .domain.path import Path, PathInput, is_absolute, normalize
from .domain.separators import SEPARATORS, detect_separator, split_to_segments, validate_segments

__all__ = [
    "Path",
    "PathInput",
    "SEPARATORS",
    "detect_separator",
    "is_absolute",
    "normalize",
    "normalize_segments",
    "relative_segments",
    "split_to_segments",
    "validate_segments",
]
