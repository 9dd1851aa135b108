"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (log_level, event_job_backend)
- Default values
- Cached singleton behavior
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from domain_pubsub.core.config import Settings, get_settings
from domain_pubsub.core.constants import JOBS_QUEUE_NAME_DEFAULT
from domain_pubsub.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test Settings default values."""

    def test_defaults_without_environment(self):
        """Engine boots with no environment variables at all."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.subscriptions_path is None
        assert settings.events_strict_mode is False
        assert settings.event_job_backend == "in-memory"
        assert settings.jobs_queue_name == JOBS_QUEUE_NAME_DEFAULT
        assert settings.is_development is True


class TestSettingsFromEnvironment:
    """Test Settings loading from environment variables."""

    def test_reads_environment_variables(self):
        env_values = {
            "ENVIRONMENT": "production",
            "LOG_LEVEL": "warning",
            "SUBSCRIPTIONS_PATH": "config/subscriptions.yml",
            "EVENTS_STRICT_MODE": "true",
            "EVENT_JOB_BACKEND": "redis",
            "REDIS_URL": "redis://cache:6379/1",
            "JOBS_QUEUE_NAME": "app:jobs",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.is_production is True
        assert settings.log_level == "WARNING"
        assert settings.subscriptions_path == Path("config/subscriptions.yml")
        assert settings.events_strict_mode is True
        assert settings.event_job_backend == "redis"
        assert settings.redis_url == "redis://cache:6379/1"
        assert settings.jobs_queue_name == "app:jobs"

    def test_testing_environment(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "testing"}, clear=True):
            settings = Settings()

        assert settings.is_testing is True
        assert settings.is_development is False


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_invalid_log_level(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError, match="Invalid log_level"):
                Settings()

    def test_invalid_job_backend(self):
        with patch.dict(os.environ, {"EVENT_JOB_BACKEND": "kafka"}, clear=True):
            with pytest.raises(ValidationError, match="Unsupported event_job_backend"):
                Settings()

    def test_invalid_environment(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        with patch.dict(os.environ, {}, clear=True):
            get_settings.cache_clear()
            first = get_settings()
            second = get_settings()

        assert first is second

    def test_cache_clear_reloads(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().log_level == "DEBUG"

        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().log_level == "ERROR"
