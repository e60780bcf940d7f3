"""Unit tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings

REQUIRED_ENV = {
    "SUPABASE_URL": "https://test.supabase.co",
    "SUPABASE_SECRET_KEY": "test-secret",
}


class TestSettings:
    """Tests for Settings class."""

    def test_settings_loads_from_environment(self) -> None:
        """Test that Settings loads values from environment variables."""
        env_vars = {
            **REQUIRED_ENV,
            "APP_NAME": "test-app",
            "APP_ENV": "testing",
            "DEBUG": "true",
            "PORT": "9000",
            "MEDIA_BUCKET": "avatars",
            "PROFILE_IMAGE_FOLDER": "faces",
            "MAX_REQUEST_BODY_SIZE": "1024",
            "OTP_SWEEP_INTERVAL_SECONDS": "15",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings(_env_file=None)

            assert settings.app_name == "test-app"
            assert settings.app_env == "testing"
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.media_bucket == "avatars"
            assert settings.profile_image_folder == "faces"
            assert settings.max_request_body_size == 1024
            assert settings.otp_sweep_interval_seconds == 15

    def test_settings_default_values(self) -> None:
        """Test that default values are applied correctly."""
        with patch.dict(os.environ, REQUIRED_ENV, clear=True):
            settings = Settings(_env_file=None)

            assert settings.app_env == "development"
            assert settings.media_bucket == "media"
            assert settings.profile_image_folder == "profile-images"
            assert settings.max_request_body_size == 10 * 1024 * 1024
            assert settings.otp_sweep_enabled is True

    def test_media_public_base_url(self) -> None:
        """Test that the public base URL ignores a trailing slash on the project URL."""
        env_vars = {**REQUIRED_ENV, "SUPABASE_URL": "https://test.supabase.co/"}

        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings(_env_file=None)

            assert settings.media_public_base_url == (
                "https://test.supabase.co/storage/v1/object/public/media"
            )

    def test_settings_cors_origins_list(self) -> None:
        """Test that CORS origins are correctly parsed into a list."""
        env_vars = {**REQUIRED_ENV, "CORS_ORIGINS": "http://localhost:3000, http://example.com ,"}

        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings(_env_file=None)

            assert settings.cors_origins_list == ["http://localhost:3000", "http://example.com"]

    def test_settings_validation_error_missing_required(self) -> None:
        """Test that validation errors are raised for missing required fields."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            error_fields = [e["loc"][0] for e in exc_info.value.errors()]
            assert "supabase_url" in error_fields
            assert "supabase_secret_key" in error_fields

    def test_sweep_interval_must_be_positive(self) -> None:
        """Test that a zero sweep interval is rejected."""
        env_vars = {**REQUIRED_ENV, "OTP_SWEEP_INTERVAL_SECONDS": "0"}

        with patch.dict(os.environ, env_vars, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestGetSettings:
    """Tests for get_settings function."""

    def test_get_settings_returns_cached_singleton(self) -> None:
        """Test that get_settings returns the same cached instance."""
        get_settings.cache_clear()

        settings1 = get_settings()
        settings2 = get_settings()

        assert isinstance(settings1, Settings)
        assert settings1 is settings2

        get_settings.cache_clear()
