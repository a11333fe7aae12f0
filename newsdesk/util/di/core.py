"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from newsdesk.config import AuthSettings, ContentSettings, Settings
from newsdesk.util.crypto import EntryCipher
from newsdesk.util.di.base import ProviderBase
from newsdesk.util.error import ConfigurationError
from newsdesk.util.password import PasswordHasher

PLACEHOLDER_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_production_secrets(settings: Settings) -> None:
    """Refuse placeholder secrets outside development and test.

    Raises:
        ConfigurationError: If a secret still holds the placeholder value
    """
    if settings.environment not in ("staging", "production"):
        return

    secrets = {
        "auth.jwt_secret": settings.auth.jwt_secret,
        "auth.entry_secret": settings.auth.entry_secret,
    }
    for name in ("weibo", "qq", "weixin"):
        app = getattr(settings.third_party, name)
        secrets[f"third_party.{name}.app_secret"] = app.app_secret

    unset = sorted(key for key, value in secrets.items() if value == PLACEHOLDER_SECRET)
    if unset:
        raise ConfigurationError(f"Secrets not configured: {', '.join(unset)}")


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        settings = Settings()
        check_production_secrets(settings)
        return settings

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide content settings."""
        return settings.content

    @provide
    def provide_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Provide bcrypt password hasher."""
        return PasswordHasher(rounds=auth_settings.bcrypt_rounds)

    @provide
    def provide_entry_cipher(self, auth_settings: AuthSettings) -> EntryCipher:
        """Provide cipher for Link Record entry passwords."""
        return EntryCipher(auth_settings.entry_secret)
