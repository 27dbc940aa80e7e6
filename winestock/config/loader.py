"""Configuration loader for WineStock.

Loads configuration from TOML files. Environment variables can override
any configuration value.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from winestock.config.schema import WinestockConfig

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_MAPPINGS: dict[str, tuple[str, str]] = {
    # Inventory
    "INVENTORY_LOW_STOCK_THRESHOLD": ("inventory", "low_stock_threshold"),
    "INVENTORY_LOCK_TIMEOUT_SECONDS": ("inventory", "lock_timeout_seconds"),
    "LOW_STOCK_THRESHOLD": ("inventory", "low_stock_threshold"),  # Shorthand
    # Storage
    "STORAGE_BACKEND": ("storage", "backend"),
    "STORAGE_DATABASE_URL": ("storage", "database_url"),
    "STORAGE_ECHO_SQL": ("storage", "echo_sql"),
    "DATABASE_URL": ("storage", "database_url"),  # Shorthand
    # Alerts
    "ALERTS_BACKEND": ("alerts", "backend"),
    # Logging
    "LOGGING_LEVEL": ("logging", "level"),
    "LOGGING_LOG_FILE": ("logging", "log_file"),
    "LOG_LEVEL": ("logging", "level"),  # Shorthand
}

INT_KEYS = ("low_stock_threshold",)
FLOAT_KEYS = ("lock_timeout_seconds",)
BOOL_KEYS = ("echo_sql",)


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/winestock/config.toml (user config)
    3. /etc/winestock/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "winestock" / "config.toml",
        Path("/etc/winestock/config.toml"),
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    for path in get_config_search_paths():
        if path.exists() and path.is_file():
            logger.debug(f"Found config file: {path}")
            return path
    return None


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def apply_env_overrides(config_dict: dict[str, Any], prefix: str = "WINESTOCK") -> None:
    """Apply environment variable overrides to configuration dictionary.

    Environment variables are mapped as follows:
    - WINESTOCK_INVENTORY_LOW_STOCK_THRESHOLD -> config_dict["inventory"]["low_stock_threshold"]
    - WINESTOCK_STORAGE_DATABASE_URL -> config_dict["storage"]["database_url"]
    - etc.

    Note: This modifies config_dict in place.
    """
    for suffix, (section, key) in ENV_MAPPINGS.items():
        value = os.environ.get(f"{prefix}_{suffix}")
        if value is None:
            continue

        if section not in config_dict:
            config_dict[section] = {}

        if key in INT_KEYS:
            config_dict[section][key] = int(value)
        elif key in FLOAT_KEYS:
            config_dict[section][key] = float(value)
        elif key in BOOL_KEYS:
            config_dict[section][key] = value.lower() in ("true", "1", "yes")
        elif key == "level":
            config_dict[section][key] = value.upper()
        else:
            config_dict[section][key] = value


def load_config(config_file: Path | None = None) -> WinestockConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        WinestockConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info(f"Loading config from: {config_file}")
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)

    return WinestockConfig(**config_dict)
