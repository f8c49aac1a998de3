"""
Summary: Export filesystem adapters.
Why: Provide one import path for the default directory lister.
"""

from .local import LocalDirectoryLister

__all__ = ["LocalDirectoryLister"]
