"""Environment-based configuration using pydantic-settings.

Example:
    >>> from adtkit.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.validation.missing_value_error
    'Value is absent.'

    # Or with environment variables:
    # ADTKIT_LOG_LEVEL=DEBUG
    # ADTKIT_VALIDATION_MISSING_VALUE_ERROR="missing"
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ADTKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors on/off (None = detect tty)")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class ValidationSettings(BaseSettings):
    """Defaults for Validation conversions and the demo form rules."""

    model_config = SettingsConfigDict(
        env_prefix="ADTKIT_VALIDATION_",
        extra="ignore",
    )

    missing_value_error: str = Field(
        default="Value is absent.",
        description="Placeholder error used by from_maybe() when converting Absent",
    )
    password_min: PositiveInt = Field(default=8, description="Password length must exceed this")


class AdtkitSettings(BaseSettings):
    """Root settings object.

    Nested groups are loaded with their own prefixes (ADTKIT_LOG_, ADTKIT_VALIDATION_).
    """

    model_config = SettingsConfigDict(
        env_prefix="ADTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, else the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> AdtkitSettings:
    """Get the global settings instance (cached)."""
    return AdtkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
