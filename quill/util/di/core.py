"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quill.config import AuthSettings, PublishingSettings, Settings
from quill.util.di.base import ProviderBase
from quill.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == AuthSettings().jwt_secret
        ):
            raise ConfigurationError("auth.jwt_secret", "must be set in production")
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_publishing_settings(self, settings: Settings) -> PublishingSettings:
        """Provide publish workflow settings."""
        return settings.publishing
