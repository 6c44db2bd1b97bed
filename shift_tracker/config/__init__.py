"""Configuration package."""

from shift_tracker.config.settings import (
    DEFAULT_DATA_PATH,
    AppSettings,
    Settings,
    StorageSettings,
    get_settings,
)

__all__ = [
    "DEFAULT_DATA_PATH",
    "AppSettings",
    "Settings",
    "StorageSettings",
    "get_settings",
]
