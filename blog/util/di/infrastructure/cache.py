"""Cache infrastructure providers."""

from collections.abc import AsyncIterator

import redis.asyncio as redis
from dishka import Scope, provide

from blog.config import CacheSettings
from blog.domain.repository import CacheStore
from blog.persistence.cache import RedisCacheStore, create_redis_client
from blog.util.di.base import ProviderBase
from blog.util.observability import instrument_redis


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider using Redis."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_redis_client(
        self, cache_settings: CacheSettings
    ) -> AsyncIterator[redis.Redis]:
        """Provide Redis client, closed with the container."""
        instrument_redis()
        client = create_redis_client(cache_settings.redis_url)
        yield client
        await client.aclose()

    @provide
    def get_cache_store(self, client: redis.Redis) -> CacheStore:
        """Provide Redis-backed cache store."""
        return RedisCacheStore(client)
