"""Core DI providers (non-mockable)."""

import logfire
from dishka import Scope, provide

from forum.config import AuthSettings, DiscussionSettings, Settings
from forum.util.di.base import ProviderBase
from forum.util.error import ConfigurationError

_DEFAULT_JWT_SECRET = AuthSettings.model_fields["jwt_secret"].default


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
            ConfigurationError: If production still uses the default JWT secret
        """
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == _DEFAULT_JWT_SECRET
        ):
            logfire.error("Default JWT secret used in production")
            raise ConfigurationError(
                "AUTH__JWT_SECRET", "the default secret cannot be used in production"
            )
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_discussion_settings(self, settings: Settings) -> DiscussionSettings:
        """Provide discussion settings."""
        return settings.discussions
