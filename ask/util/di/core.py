"""Configuration DI provider."""

from dishka import Scope, provide

from ask.config import AuthSettings, ContentSettings, NotificationSettings, Settings
from ask.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded from the environment and .env, shared for the app lifetime."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide content settings."""
        return settings.content

    @provide
    def provide_notification_settings(
        self, settings: Settings
    ) -> NotificationSettings:
        """Provide notification settings."""
        return settings.notifications
