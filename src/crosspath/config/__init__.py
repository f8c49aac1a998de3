"""
Summary: Optional logging configuration and the settings derived from it.
Why: Only platform.logging imports this package, so importing crosspath reads no files.
"""

from .config import Config, load_or_default
from .paths import ENV_CONFIG_FILE, config_path
from .settings import LOG_KEEP_SEGMENTS, LOG_LEVEL

__all__ = ["Config", "ENV_CONFIG_FILE", "LOG_KEEP_SEGMENTS", "LOG_LEVEL", "config_path", "load_or_default"]
