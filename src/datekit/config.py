"""Configuration management for datekit.

Uses pydantic-settings to load configuration from environment variables
and .env files.
"""

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from datekit.exceptions import ConfigurationError
from datekit.utils.datetime import resolve_timezone


class Settings(BaseSettings):
    """datekit configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="DATEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # IANA zone name or "UTC"; empty means the host's local timezone
    default_timezone: str = Field(default="")

    # Used by parse_instant, which takes no caller-supplied pattern
    default_parse_pattern: str = Field(
        default="%m/%d/%y %I:%M %p",
        description="Short date+time form, e.g. 1/1/13 9:00 AM",
    )

    log_level: str = Field(default="WARNING")

    @field_validator("default_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        value = value.strip()
        try:
            resolve_timezone(value)
        except ConfigurationError as e:
            raise ValueError(str(e)) from e
        return value

    @field_validator("default_parse_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        if not value:
            raise ValueError("default_parse_pattern must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        return value.upper()


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError("Invalid datekit settings", errors=e.errors()) from e
    return _settings


def configure(**overrides: Any) -> Settings:
    """Replace the global settings with the current ones plus overrides.

    Overrides are validated like environment values.
    """
    global _settings
    values = {**get_settings().model_dump(), **overrides}
    try:
        _settings = Settings(**values)
    except ValidationError as e:
        raise ConfigurationError("Invalid datekit settings", errors=e.errors()) from e
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
