"""
Configuration management and singleton pattern.

This module provides the main configuration loading interface, implementing a
singleton pattern so the configuration file is read only once per process.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from ..models.config import AppConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_main_config
from .validators import validate_app_config

logger = logging.getLogger(__name__)

# Environment variable naming an alternative configuration file.
CONFIG_ENV_VAR = "MYBUILD_CONFIG"

# --- Global Singleton for Configuration ---

_CONFIG: Optional[AppConfig] = None

# Defaults to `conf/config.toml` at the repository root. Can be overridden
# with set_config_path() or the MYBUILD_CONFIG environment variable.
_DEFAULT_CONFIG_FILE_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"
_CONFIG_FILE_PATH: Optional[Path] = None


def set_config_path(config_path: Path) -> None:
    """
    Set a custom configuration file path.

    Clears any cached configuration so the next get_config() call reloads
    from the new path.
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = Path(config_path)
    _CONFIG = None
    logger.debug(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """
    Clear the cached configuration and any custom path, forcing a reload on
    next access.
    """
    global _CONFIG, _CONFIG_FILE_PATH
    _CONFIG = None
    _CONFIG_FILE_PATH = None
    logger.debug("Configuration cache cleared")


def get_config_path() -> Path:
    """Return the configuration file path that get_config() reads."""
    if _CONFIG_FILE_PATH is not None:
        return _CONFIG_FILE_PATH
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return _DEFAULT_CONFIG_FILE_PATH


def _load_config(config_path: Path, required: bool) -> AppConfig:
    """
    Load and validate the configuration file.

    Args:
        config_path: Path to the config.toml file
        required: Whether a missing file is an error. When False, built-in
            defaults are used instead.

    Raises:
        FileNotFoundError: If a required configuration file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if not required and not config_path.exists():
        logger.debug(f"No configuration file at {config_path}, using built-in defaults")
        return validate_app_config({})

    try:
        config_data = load_main_config(config_path)
        app_config = validate_app_config(config_data)
        logger.debug(f"Successfully loaded configuration from {config_path}")
        return app_config
    except Exception as e:
        handle_config_error(
            error=e,
            context="loading configuration file",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise


def get_config() -> AppConfig:
    """
    Get the global application configuration, loading it if necessary.

    Returns:
        The singleton AppConfig instance
    """
    global _CONFIG
    if _CONFIG is None:
        config_path = get_config_path()
        required = config_path != _DEFAULT_CONFIG_FILE_PATH
        _CONFIG = _load_config(config_path, required=required)
    return _CONFIG


def is_config_loaded() -> bool:
    """Check whether the configuration has been loaded."""
    return _CONFIG is not None
