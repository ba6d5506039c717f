"""Configuration management for synthetic-quota."""

from synthetic_quota.config.paths import (
    config_dir,
    config_file,
)
from synthetic_quota.config.settings import (
    Config,
    DisplayConfig,
    get_config,
    load_config,
    reload_config,
)

__all__ = [
    # paths
    "config_dir",
    "config_file",
    # settings
    "Config",
    "DisplayConfig",
    "get_config",
    "load_config",
    "reload_config",
]
