"""Mock persistence providers for testing."""

from dishka import Scope, provide

from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    RefreshTokenRepository,
    UserRepository,
)
from blog.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryRefreshTokenRepository,
    InMemoryUserRepository,
)
from blog.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(
        self, comment_repository: CommentRepository
    ) -> PostRepository:
        """Provide in-memory post repository cascading to comments."""
        return InMemoryPostRepository(comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_refresh_token_repository(
        self, user_repository: UserRepository
    ) -> RefreshTokenRepository:
        """Provide in-memory refresh token repository."""
        return InMemoryRefreshTokenRepository(user_repository)
