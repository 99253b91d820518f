"""
oulipy.config - Configuration loading and defaults
"""

from oulipy.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from oulipy.config.loader import (
    ConfigError,
    _apply_env_overrides,
    _try_parse_env_value,
    default_config_document,
    find_config_file,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "ConfigError",
    "default_config_document",
    "find_config_file",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
]
