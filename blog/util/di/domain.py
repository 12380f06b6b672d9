"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, CacheSettings, CommentSettings, JWTSettings
from blog.domain.repository import (
    CacheStore,
    CommentRepository,
    PostRepository,
    RefreshTokenRepository,
    UserRepository,
)
from blog.domain.service import (
    AuthService,
    CommentDepthPolicy,
    CommentService,
    CommentTreeService,
    PostService,
    TokenService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_token_service(self, jwt_settings: JWTSettings) -> TokenService:
        """Provide access token domain service."""
        return TokenService(jwt_settings=jwt_settings)

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        refresh_token_repository: RefreshTokenRepository,
        token_service: TokenService,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            refresh_token_repository=refresh_token_repository,
            token_service=token_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_comment_depth_policy(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> CommentDepthPolicy:
        """Provide reply depth policy."""
        return CommentDepthPolicy(
            comment_repository=comment_repository, comment_settings=comment_settings
        )

    @provide
    def get_comment_tree_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        cache: CacheStore,
        comment_settings: CommentSettings,
    ) -> CommentTreeService:
        """Provide comment tree domain service."""
        return CommentTreeService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            cache=cache,
            comment_settings=comment_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        depth_policy: CommentDepthPolicy,
        cache: CacheStore,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            depth_policy=depth_policy,
            cache=cache,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        cache: CacheStore,
        cache_settings: CacheSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, cache=cache, cache_settings=cache_settings
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        cache: CacheStore,
        cache_settings: CacheSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, cache=cache, cache_settings=cache_settings
        )
