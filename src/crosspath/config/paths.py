"""
Summary: Locate the optional ``crosspath.toml`` logging configuration file.
Why: An explicit path beats ``CROSSPATH_CONFIG``, which beats the working directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

ENV_CONFIG_FILE: Final[str] = "CROSSPATH_CONFIG"
CONFIG_FILE_NAME: Final[str] = "crosspath.toml"


def default_config_path() -> Path:
    """Get the default location of ``crosspath.toml`` (current working directory)."""
    return Path.cwd() / CONFIG_FILE_NAME


def config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Return the configuration file path after applying overrides.

    Args:
        explicit_path: Caller-supplied file; always wins.
        env: Environment mapping consulted for ``CROSSPATH_CONFIG``; defaults to ``os.environ``.

    Returns:
        Path: Expanded, absolute location. The file may not exist.
    """
    if explicit_path is not None:
        candidate = Path(explicit_path)
    else:
        override = (env if env is not None else os.environ).get(ENV_CONFIG_FILE, "").strip()
        candidate = Path(override) if override else default_config_path()
    return candidate.expanduser().resolve()


__all__ = [
    "CONFIG_FILE_NAME",
    "ENV_CONFIG_FILE",
    "config_path",
    "default_config_path",
]
