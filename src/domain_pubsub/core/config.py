"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. The subscription table itself lives in a separate YAML/JSON file;
Settings only knows where that file is and how the engine should treat it.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from domain_pubsub.core.config import get_settings

    settings = get_settings()
    path = settings.subscriptions_path

    if settings.events_strict_mode:
        # Lint subscriptions at boot
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain_pubsub.core.constants import JOBS_QUEUE_NAME_DEFAULT
from domain_pubsub.core.enums import Environment


class Settings(BaseSettings):
    """
    Engine settings (flat structure).

    Loads configuration from environment variables. Every field has a safe
    default so the engine can boot in tests without any environment.

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Subscription table
    subscriptions_path: Path | None = Field(
        default=None,
        description="Path to the subscription file (.yml, .yaml or .json)",
    )
    events_strict_mode: bool = Field(
        default=False,
        description="Lint handlers against subscriptions at boot and abort on drift",
    )

    # Async job backend
    event_job_backend: str = Field(
        default="in-memory",
        description="Async dispatch backend ('in-memory' or 'redis')",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for the 'redis' job backend",
    )
    jobs_queue_name: str = Field(
        default=JOBS_QUEUE_NAME_DEFAULT,
        description="Redis list key that async event jobs are pushed onto",
    )

    model_config = SettingsConfigDict(
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
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log_level: {v}")
        return level

    @field_validator("event_job_backend")
    @classmethod
    def validate_event_job_backend(cls, v: str) -> str:
        """
        Validate the async job backend name.

        Args:
            v: Backend name.

        Returns:
            str: Validated backend name.

        Raises:
            ValueError: If the backend is not supported.
        """
        if v not in {"in-memory", "redis"}:
            raise ValueError(
                f"Unsupported event_job_backend: {v}. Supported: 'in-memory', 'redis'"
            )
        return v

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
