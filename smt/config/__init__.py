"""
Runtime Configuration Module

Provides configuration loading for tree construction and logging.
"""

from .runtime import (
    TreeConfig,
    LoggingConfig,
    RuntimeConfig,
    configure_logging,
    get_default_config,
    set_default_config,
)

__all__ = [
    "TreeConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "configure_logging",
    "get_default_config",
    "set_default_config",
]
