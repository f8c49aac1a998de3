"""
Summary: Derived logging settings sourced from the loaded configuration.
Why: Expose validated constants to setup_logger without file I/O.
"""

from __future__ import annotations

import logging

from crosspath.config.config import config as app_config

_level_name = str(getattr(app_config, "log_level", "WARNING")).upper()
_level = logging.getLevelName(_level_name)
LOG_LEVEL: int = _level if isinstance(_level, int) else logging.WARNING

_keep = getattr(app_config, "log_keep_segments", 4)
LOG_KEEP_SEGMENTS: int = _keep if isinstance(_keep, int) and not isinstance(_keep, bool) and _keep > 0 else 4


__all__ = ["LOG_KEEP_SEGMENTS", "LOG_LEVEL"]
