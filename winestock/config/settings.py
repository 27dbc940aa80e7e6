"""Global settings instance for WineStock.

This module provides a settings object with a flat interface over the
structured configuration loaded from config.toml and the environment.
"""

import logging
from pathlib import Path

from winestock.config.loader import load_config
from winestock.config.schema import WinestockConfig

logger = logging.getLogger(__name__)


class Settings:
    """Settings object wrapping a WinestockConfig.

    Attributes are exposed as properties so callers don't depend on the
    section layout of config.toml.
    """

    def __init__(self, config: WinestockConfig | None = None):
        """Initialize settings.

        Args:
            config: Optional WinestockConfig instance. If not provided, loads from file.
        """
        self._config = config or load_config()

    @property
    def config(self) -> WinestockConfig:
        """Get the full configuration object."""
        return self._config

    # Application
    @property
    def app_name(self) -> str:
        return self._config.app_name

    # Inventory
    @property
    def low_stock_threshold(self) -> int:
        return self._config.inventory.low_stock_threshold

    @property
    def lock_timeout_seconds(self) -> float:
        return self._config.inventory.lock_timeout_seconds

    # Storage
    @property
    def storage_backend(self) -> str:
        return self._config.storage.backend

    @property
    def database_url(self) -> str:
        return self._config.storage.database_url

    @property
    def database_path(self) -> Path | None:
        return self._config.storage.database_path

    @property
    def echo_sql(self) -> bool:
        return self._config.storage.echo_sql

    # Alerts
    @property
    def alert_backend(self) -> str:
        return self._config.alerts.backend

    # Logging
    @property
    def log_level(self) -> str:
        return self._config.logging.level

    @property
    def log_format(self) -> str:
        return self._config.logging.format

    @property
    def log_file(self) -> Path | None:
        return self._config.logging.log_file

    def __repr__(self) -> str:
        return f"Settings({self._config!r})"


# Global settings instance - lazily initialized
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    The settings are loaded once and cached for subsequent calls.

    Returns:
        The global Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance.

    This is primarily useful for testing to reload configuration.
    """
    global _settings
    _settings = None

