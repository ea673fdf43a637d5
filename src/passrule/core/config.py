"""Configuration management for PassRule.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. The settings describe the default
password policy and the logging setup; they are loaded once and immutable
during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSRULE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "PassRule"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Length Policy
    min_length: int = Field(default=8, ge=1)
    max_length: int = Field(default=64, ge=1)

    # Character Characteristics Policy
    characteristics_required: int = Field(
        default=3,
        description="How many of the upper/lower/digit/special classes must be present",
    )
    report_characteristic_failures: bool = False

    # Sequence and Repetition Policy
    sequence_length: int = Field(default=5, ge=3)
    sequence_wrap: bool = False
    repeat_length: int = Field(default=4, ge=3)

    # Username Policy
    check_username: bool = True

    # Dictionary Policy
    dictionary_path: str | None = None
    dictionary_case_sensitive: bool = False

    # Message Catalog Overrides (JSON object of error code -> template)
    messages_path: str | None = None

    # Generator Settings
    generate_length: int = Field(default=16, ge=4)

    @field_validator("characteristics_required")
    @classmethod
    def validate_characteristics_required(cls, v: int) -> int:
        """Validate the M-of-4 threshold."""
        if not 1 <= v <= 4:
            raise ValueError("characteristics_required must be between 1 and 4")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @model_validator(mode="after")
    def validate_length_bounds(self) -> "Settings":
        """Validate that the length bounds are ordered."""
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) must not be less than "
                f"min_length ({self.min_length})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
