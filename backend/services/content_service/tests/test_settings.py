"""
Tests for content service configuration.
"""

import pytest
from pydantic import ValidationError

from common.config import BaseServiceSettings, ContentServiceSettings, get_settings
from services.content_service.database import create_store_client


class TestContentServiceSettings:
    """Tests for ContentServiceSettings."""

    def test_trailing_slash_is_stripped(self):
        """Test that the project URL is normalized."""
        settings = ContentServiceSettings(SUPABASE_URL="https://abc.supabase.co/")

        assert settings.SUPABASE_URL == "https://abc.supabase.co"

    def test_admin_login_url(self, settings):
        """Test the admin-login function URL."""
        assert settings.admin_login_url == "https://example.supabase.co/functions/v1/admin-login"

    def test_admin_login_function_override(self):
        """Test that the login function name can be changed."""
        settings = ContentServiceSettings(
            SUPABASE_URL="https://abc.supabase.co",
            ADMIN_LOGIN_FUNCTION="staff-login",
        )

        assert settings.admin_login_url == "https://abc.supabase.co/functions/v1/staff-login"

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_timeout_must_be_positive(self, timeout):
        """Test that a non-positive timeout is rejected."""
        with pytest.raises(ValidationError):
            ContentServiceSettings(SUPABASE_TIMEOUT=timeout)

    def test_cors_origins_from_string(self):
        """Test that comma-separated CORS origins are split."""
        settings = ContentServiceSettings(CORS_ORIGINS="https://a.com, https://b.com,")

        assert settings.CORS_ORIGINS == ["https://a.com", "https://b.com"]

    def test_reads_environment(self, monkeypatch):
        """Test that settings are loaded from environment variables."""
        monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "env-key")

        settings = ContentServiceSettings()

        assert settings.SUPABASE_URL == "https://env.supabase.co"
        assert settings.SUPABASE_ANON_KEY == "env-key"


class TestGetSettings:
    """Tests for get_settings."""

    @pytest.mark.parametrize("name", ["content-service", "CONTENT", "site-content"])
    def test_content_names_match(self, name):
        """Test fuzzy matching of the content service name."""
        assert isinstance(get_settings(name), ContentServiceSettings)

    def test_default_settings(self):
        """Test that unknown names fall back to the base settings."""
        settings = get_settings("unknown")

        assert type(settings) is BaseServiceSettings
        assert settings.SERVICE_NAME == "base-service"


class TestCreateStoreClient:
    """Tests for the Supabase client factory."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [{"SUPABASE_URL": ""}, {"SUPABASE_ANON_KEY": ""}],
    )
    async def test_missing_configuration_raises(self, overrides):
        """Test that the client refuses to start without URL and key."""
        values = {"SUPABASE_URL": "https://abc.supabase.co", "SUPABASE_ANON_KEY": "key"}
        values.update(overrides)

        with pytest.raises(EnvironmentError, match="must be set"):
            await create_store_client(ContentServiceSettings(**values))
