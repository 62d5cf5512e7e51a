"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() to share one instance across the process.

Usage:
    from backend.settings import get_settings, Settings

    settings = get_settings()
    print(settings.schedule_storage_path)

    # Test settings without reading .env
    settings = Settings(environment="test", _env_file=None)
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )
    log_level: str = Field(
        default="INFO",
        description="Level applied to the planner's loggers",
    )

    # -------------------------------------------------------------------------
    # Schedule Storage
    # -------------------------------------------------------------------------
    schedule_storage_path: str = Field(
        default=".pulseflow/storage.json",
        description="JSON file holding the persisted schedule slot",
    )
    schedule_storage_key: str = Field(
        default="pulseflow-schedule-v1",
        min_length=1,
        description="Storage slot name of the serialized schedule",
    )

    # -------------------------------------------------------------------------
    # Workout Library
    # -------------------------------------------------------------------------
    workout_library_path: Optional[str] = Field(
        default=None,
        description="Override for the shipped workout library YAML",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is a standard logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level '{v}'")
        return level

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
