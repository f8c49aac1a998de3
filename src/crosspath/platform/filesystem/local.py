"""
Summary: Local filesystem adapter listing directory entries through os.scandir.
Why: Satisfy the DirectoryLister port for AbsolutePath.readdir on the host machine.
"""

from __future__ import annotations

import logging
import os

from crosspath.features.kinds.usecases.ports import DirectoryLister

logger = logging.getLogger(__name__)


class LocalDirectoryLister(DirectoryLister):
    """Thin wrapper around ``os.scandir``."""

    def list_names(self, path: str) -> list[str]:
        logger.debug("Listing directory %s", path)
        with os.scandir(path) as entries:
            names = sorted(entry.name for entry in entries)
        logger.debug("Found %d entries in %s", len(names), path)
        return names


__all__ = ["LocalDirectoryLister"]
