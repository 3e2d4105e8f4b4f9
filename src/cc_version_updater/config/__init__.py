"""Configuration management.

Modules:
    settings: Config loading, validation, environment overrides
"""

from cc_version_updater.config.settings import (
    CONFIG_SCHEMA,
    DEFAULT_CONFIG,
    Settings,
    get_cache_dir,
    get_config_file,
    get_plugin_root,
    load_config,
    load_settings,
    validate_config,
)

__all__ = [
    "CONFIG_SCHEMA",
    "DEFAULT_CONFIG",
    "Settings",
    "get_cache_dir",
    "get_config_file",
    "get_plugin_root",
    "load_config",
    "load_settings",
    "validate_config",
]
