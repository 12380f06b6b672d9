"""Mock cache provider for testing."""

from dishka import Scope, provide

from blog.domain.repository import CacheStore
from blog.persistence.cache import InMemoryCacheStore
from blog.util.di.infrastructure.cache import CacheProvider


class MockCacheProvider(CacheProvider):
    """Mock cache provider backed by a dict.

    REQUEST scope keeps cached entries from leaking between tests.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_cache_store(self) -> CacheStore:
        """Provide in-memory cache store."""
        return InMemoryCacheStore()
