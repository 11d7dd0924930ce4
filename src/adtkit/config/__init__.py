"""Configuration management using pydantic-settings."""

from .settings import (
    AdtkitSettings,
    LoggingSettings,
    ValidationSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "AdtkitSettings",
    "LoggingSettings",
    "ValidationSettings",
    "clear_settings_cache",
    "get_settings",
]
