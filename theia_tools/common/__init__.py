"""
================================================================================
Theia Tools Common Utilities
================================================================================

Shared configuration management and logging setup.

Usage:
    from theia_tools.common import get_config, init_logger

    init_logger()
    version = get_config("theia.version", "1.18.0")

================================================================================
"""

from .global_config import (
    ConfigurationError,
    get_config,
    get_logger,
    init_logger,
    reload_config,
    reset_config,
    set_config,
)

__all__ = [
    "ConfigurationError",
    "get_config",
    "get_logger",
    "init_logger",
    "reload_config",
    "reset_config",
    "set_config",
]
