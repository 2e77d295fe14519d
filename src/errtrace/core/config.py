"""
Configuration management using Pydantic Settings.

Settings are loaded from ``ERRTRACE_``-prefixed environment variables. Every
field has a default, so importing the library never requires configuration.

Usage:
    from errtrace.core.config import get_settings

    settings = get_settings()
    if settings.capture_call_sites:
        ...
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errtrace.core.enums import Environment

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (``ERRTRACE_LOG_LEVEL`` etc.)
        2. Default values

    Returns:
        Settings: Library configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    capture_call_sites: bool = Field(
        default=True,
        description="Record the file, line and function that created each chain node. "
        "When disabled every node carries the unknown call site.",
    )

    model_config = SettingsConfigDict(
        env_prefix="ERRTRACE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-case level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        """
        Numeric logging level for the configured level name.

        Returns:
            int: Value from the ``logging`` module (e.g. ``logging.WARNING``).
        """
        return logging.getLevelNamesMapping()[self.log_level]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.
    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
