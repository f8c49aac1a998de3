"""
Summary: Export the ports consumed by the kind-tagged paths.
Why: Let adapters implement ports without importing the domain layer.
"""

from .ports import DirectoryLister

__all__ = ["DirectoryLister"]
