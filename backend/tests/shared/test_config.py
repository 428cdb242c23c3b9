"""Tests for shared/config.py."""

import os
from unittest.mock import patch

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Movie Library API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.host == "0.0.0.0"
        assert settings.session_cookie_name == "session_id"
        assert settings.session_ttl_seconds == 86400
        assert settings.session_cookie_secure is False

    def test_loads_from_prefixed_env(self):
        """Settings should load LIBRARY_-prefixed environment variables."""
        with patch.dict(os.environ, {"LIBRARY_DEBUG": "true", "LIBRARY_PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables belong to other programs."""
        with patch.dict(os.environ, {"PORT": "9999"}):
            settings = Settings(_env_file=None)
            assert settings.port == 8000

    def test_loads_supabase_and_session_config(self):
        with patch.dict(os.environ, {
            "LIBRARY_SUPABASE_URL": "https://test.supabase.co",
            "LIBRARY_SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "LIBRARY_SESSION_TTL_SECONDS": "600",
            "LIBRARY_SESSION_COOKIE_SECURE": "true",
        }):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.session_ttl_seconds == 600
            assert settings.session_cookie_secure is True


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance on repeated calls."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
