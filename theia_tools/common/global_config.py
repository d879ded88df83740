"""
================================================================================
Global Configuration for Theia Tools
================================================================================

This module provides centralized configuration management for the locator
tools and page objects, including logging setup and configuration file
loading.

Features:
    - YAML-based configuration loading (config.yaml + {ENV}.yaml)
    - Environment variable support (THEIA__VERSION=1.17.0)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from loguru import logger

from theia_tools.locator_loader.merge import merge

# Global configuration storage
_config: Dict[str, Any] = {}
_config_dir: Optional[Path] = None
_logger_initialized: bool = False

DEFAULT_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


class ConfigurationError(Exception):
    """Raised when configuration loading fails."""
    pass


def init_logger(level: str = None, format_str: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = level or get_config("logging.level", "INFO")
    log_format = format_str or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=str(log_level).upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=str(log_level).upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """Returns the configured Loguru logger instance."""
    if not _logger_initialized:
        init_logger()
    return logger


def _ensure_config_loaded() -> None:
    if not _config:
        _load_config()


def _candidate_config_dirs() -> List[Path]:
    if _config_dir is not None:
        return [_config_dir]
    dirs = []
    env_dir = os.getenv("THEIA_TOOLS_CONFIG_DIR")
    if env_dir:
        dirs.append(Path(env_dir))
    dirs.extend([
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ])
    return dirs


def _load_config() -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENV}.yaml)
        4. Environment variables (override YAML settings)
    """
    global _config

    _config = _get_defaults()

    config_dir = next((d for d in _candidate_config_dirs() if d.is_dir()), None)
    if config_dir is None:
        logger.warning("No configuration directory found. Using defaults.")
    else:
        _config = merge(_config, _read_yaml(config_dir / "config.yaml"))

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config = _read_yaml(config_dir / f"{env}.yaml")
        if env_config:
            _config = merge(_config, env_config)
            logger.debug(f"Merged environment config: {config_dir / f'{env}.yaml'}")

    _apply_env_overrides()


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    logger.debug(f"Loaded configuration from {path}")
    return data


def _get_defaults() -> Dict[str, Any]:
    """
    Returns default configuration values.
    """
    return {
        "logging": {
            "level": "INFO",
            "format": DEFAULT_LOG_FORMAT,
        },
        "theia": {
            "distribution": "theia",
            "base_version": "1.10.0",
            "version": "1.18.0",
            "base_url": "http://localhost:3000",
        },
        "timeouts": {
            "implicit": 30000,
            "page_load": 120000,
        },
    }


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Environment variable naming convention:
        - Use double underscore to separate nested keys
        - Example: THEIA__VERSION=1.17.0 overrides theia.version
    """
    for key, value in os.environ.items():
        if "__" in key and not key.startswith("_"):
            parts = [p.lower() for p in key.split("__") if p]
            if len(parts) > 1:
                _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """
    Sets a nested dictionary value using a list of keys.
    """
    for key in keys[:-1]:
        if not isinstance(d.get(key), dict):
            d[key] = {}
        d = d[key]
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "theia.version").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("theia.version")
        "1.18.0"
        >>> get_config("timeouts.implicit", 30000)
        30000
    """
    _ensure_config_loaded()

    value = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config(config_dir: Union[str, Path, None] = None) -> None:
    """
    Reloads the configuration from files.

    Args:
        config_dir: Directory to read config.yaml from instead of the
            default search locations.
    """
    global _config, _config_dir, _logger_initialized
    _config = {}
    _config_dir = Path(config_dir) if config_dir is not None else None
    _logger_initialized = False
    _load_config()
    init_logger()
    logger.info("Configuration reloaded.")


def reset_config() -> None:
    """Forget loaded configuration; the next access reloads it."""
    global _config, _config_dir
    _config = {}
    _config_dir = None
