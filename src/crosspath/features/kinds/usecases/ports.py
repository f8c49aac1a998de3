"""
Summary: Protocol describing the directory-listing collaborator used by AbsolutePath.
Why: Keep the path algebra free of filesystem calls; adapters satisfy the port.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DirectoryLister(Protocol):
    """Read access to the names inside a directory."""

    def list_names(self, path: str) -> list[str]:
        """Return the child entry names of ``path``; I/O errors propagate."""
        ...


__all__ = ["DirectoryLister"]
