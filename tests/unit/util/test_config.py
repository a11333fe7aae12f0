"""Unit tests for settings and the production secret check."""

import pytest

from newsdesk.config import AuthSettings, Settings
from newsdesk.util.di.core import check_production_secrets
from newsdesk.util.error import ConfigurationError


class TestSettings:
    """Tests for derived settings."""

    def test_callback_urls_derived_from_base_url(self):
        settings = Settings(environment="development", host="localhost", port=8000)

        assert settings.third_party.weibo.callback_url == (
            "http://localhost:8000/oauth/weibo/callback"
        )
        assert settings.third_party.qq.state == "test"
        assert settings.third_party.weixin.state == "STATE"
        assert settings.third_party.weibo.state is None

    def test_production_uses_https(self):
        settings = Settings(environment="production", host="api.example.org")

        assert settings.api.base_url == "https://api.example.org"


class TestCheckProductionSecrets:
    """Tests for check_production_secrets()."""

    def test_development_allows_placeholders(self):
        check_production_secrets(Settings(environment="development"))

    def test_production_rejects_placeholders(self):
        with pytest.raises(ConfigurationError, match="auth.jwt_secret"):
            check_production_secrets(Settings(environment="production"))

    def test_production_with_secrets(self):
        settings = Settings(
            environment="production",
            auth=AuthSettings(jwt_secret="j", entry_secret="e"),
            third_party={
                "weibo": {"app_secret": "w"},
                "qq": {"app_secret": "q", "state": "test"},
                "weixin": {"app_secret": "x", "state": "STATE"},
            },
        )

        check_production_secrets(settings)
