"""Tests for shared/config.py."""

import os
from pathlib import Path
from unittest.mock import patch

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings()
        assert settings.app_name == "storerate"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.backend_url == "http://localhost:8000"
        assert settings.request_timeout == 30.0
        assert settings.log_level == "WARNING"
        assert settings.signup_precheck is False

    def test_default_session_file_in_home(self):
        """Session file should default to a file under the home directory."""
        settings = Settings()
        assert settings.session_file == Path.home() / ".storerate" / "session.json"

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {
            "BACKEND_URL": "https://ratings.example.com",
            "REQUEST_TIMEOUT": "5",
            "SIGNUP_PRECHECK": "true",
        }):
            settings = Settings()
            assert settings.backend_url == "https://ratings.example.com"
            assert settings.request_timeout == 5.0
            assert settings.signup_precheck is True

    def test_session_file_from_env(self, tmp_path):
        """SESSION_FILE should be parsed as a path."""
        target = tmp_path / "s.json"
        with patch.dict(os.environ, {"SESSION_FILE": str(target)}):
            assert Settings().session_file == target


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
