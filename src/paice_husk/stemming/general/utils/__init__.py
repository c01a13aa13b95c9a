# paice_husk/stemming/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the stemming stack.
Returns: Public API via load_settings/load_config/clear_config_cache and debug/reload_topics.
Used by: The Stemmer facade, the CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    StemmerSettings,
    clear_config_cache,
    load_config,
    load_settings,
    resolve_data_dir,
)
from .log import (
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "load_settings",
    "clear_config_cache",
    "resolve_data_dir",
    "StemmerSettings",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enabled",
    "reload_topics",
]
