"""
Configuration Management for Shift Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Nothing else in the package reads the environment or knows a default
file path; the storage location is handed to the store explicitly.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATA_PATH = Path("data") / "shifts.csv"


class StorageSettings(BaseSettings):
    """Backing store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SHIFT_TRACKER_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_path: Path = Field(
        default=DEFAULT_DATA_PATH,
        description="Path of the backing file, relative to the working directory"
    )
    backend: Literal["csv", "json"] = Field(
        default="csv",
        description="Which file format backs the ledger"
    )
    create_parent_dirs: bool = Field(
        default=False,
        description="Create missing parent directories before saving"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHIFT_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log_level: str = Field(
        default="WARNING",
        description="Minimum level for diagnostic logs on stderr"
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of key=value text"
    )

    # Summary view
    high_pay_threshold: float = Field(
        default=100.0,
        ge=0.0,
        description="Pay at or above which a shift counts as high-pay"
    )
    tax_periods_per_year: float = Field(
        default=52.0 / 4.0,
        gt=0.0,
        description="Factor used to scale gross pay up to a yearly figure"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names in any case."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    storage: StorageSettings = Field(default_factory=StorageSettings)
    app: AppSettings = Field(default_factory=AppSettings)


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
