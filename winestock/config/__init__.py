"""WineStock configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority)
2. ./config.toml (project root - for development)
3. ~/.config/winestock/config.toml (user config)
4. /etc/winestock/config.toml (system config)
"""

from winestock.config.schema import (
    AlertConfig,
    InventoryConfig,
    LoggingConfig,
    StorageConfig,
    WinestockConfig,
)
from winestock.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "AlertConfig",
    "InventoryConfig",
    "LoggingConfig",
    "Settings",
    "StorageConfig",
    "WinestockConfig",
    "get_settings",
    "reset_settings",
]
