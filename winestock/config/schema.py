"""Pydantic models for WineStock configuration.

These models define the structure of config.toml.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class InventoryConfig(BaseModel):
    """Inventory core configuration."""

    low_stock_threshold: int = Field(default=5, ge=0)
    # Bounded wait for the mutation lock before an operation is reported as not applied
    lock_timeout_seconds: float = Field(default=1.0, gt=0)


class StorageConfig(BaseModel):
    """Storage backend configuration."""

    backend: Literal["memory", "sqlite"] = "sqlite"
    database_url: str = "sqlite:///./data/winestock.db"
    echo_sql: bool = False

    @property
    def database_path(self) -> Path | None:
        """Get the SQLite file path, or None for in-memory/non-file URLs."""
        if ":///" not in self.database_url:
            return None
        path = self.database_url.split(":///", 1)[1]
        if not path or path == ":memory:":
            return None
        return Path(path)


class AlertConfig(BaseModel):
    """Low-stock alert configuration."""

    backend: Literal["console", "log"] = "console"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Path | None = None


class WinestockConfig(BaseModel):
    """Main WineStock configuration loaded from config.toml."""

    app_name: str = "WineStock"
    inventory: InventoryConfig = Field(default_factory=InventoryConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    alerts: AlertConfig = Field(default_factory=AlertConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
