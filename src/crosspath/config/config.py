"""
Summary: Frozen logging configuration loaded from ``crosspath.toml`` with tomllib.
Why: Let applications tune crosspath's diagnostics without touching path semantics.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, ClassVar

from crosspath.config.paths import config_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Settings read by ``setup_logger``; the path algebra never consults them."""

    # Level applied by setup_logger() to the console handler
    log_level: str = "WARNING"

    # Trailing segments PathRichHandler keeps when abbreviating long paths
    log_keep_segments: int = 4

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Config":
        """Build a config from parsed TOML, ignoring unknown keys.

        Args:
            values: Parsed key/value pairs.

        Returns:
            Config: Instance with defaults for absent keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in values.items() if key in known})

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from TOML.

        A missing file yields the defaults; nothing is written to disk.
        Calls without arguments reuse the cached instance.

        Args:
            path: Explicit configuration file.
            env: Environment mapping used for the ``CROSSPATH_CONFIG`` override.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
        """
        use_cache = path is None and env is None
        if use_cache and cls._instance is not None:
            return cls._instance

        config_file = config_path(path, env)

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to parse configuration %s: %s", config_file, e)
                raise
            instance = cls.from_mapping(config_dict)
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            logger.debug("No configuration at %s; using defaults", config_file)

        if use_cache:
            cls._instance = instance
            cls._loaded_from = config_file
        return instance


def load_or_default() -> Config:
    """Load the cached configuration, falling back to defaults on a bad file.

    Used at import time so an unreadable ``crosspath.toml`` degrades to a
    warning instead of an ``ImportError`` in the caller.
    """
    try:
        return Config.load()
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Using default configuration; could not load %s: %s", config_path(), e)
        return Config()


config: Config = load_or_default()


__all__ = ["Config", "config", "load_or_default"]
