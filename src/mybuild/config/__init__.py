"""
Configuration management for the mybuild package.

This module provides a clean interface for loading, validating, and accessing
the wrapper defaults from a TOML file with singleton pattern management.
"""

from .manager import (
    CONFIG_ENV_VAR,
    clear_config_cache,
    get_config,
    get_config_path,
    is_config_loaded,
    set_config_path,
)

from .loader import load_main_config, load_toml_file
from .validators import (
    validate_app_config,
    validate_build_defaults,
    validate_paths_config,
    validate_toolchain_config,
)

__all__ = [
    # Main interface
    "CONFIG_ENV_VAR",
    "get_config",
    "get_config_path",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    # Advanced interface
    "load_toml_file",
    "load_main_config",
    "validate_app_config",
    "validate_build_defaults",
    "validate_paths_config",
    "validate_toolchain_config",
]
