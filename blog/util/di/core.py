"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blog.config import (
    AuthSettings,
    CacheSettings,
    CommentSettings,
    JWTSettings,
    Settings,
)
from blog.util.di.base import ProviderBase
from blog.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file once per
    container and shared as immutable snapshots.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_jwt_settings(self, settings: Settings) -> JWTSettings:
        """Provide JWT settings, refusing to start without a signing key."""
        if not settings.jwt.secret_key:
            raise ConfigurationError("JWT secret key not configured (JWT__SECRET_KEY)")
        return settings.jwt

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment settings."""
        return settings.comments

    @provide
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        """Provide cache settings."""
        return settings.cache
