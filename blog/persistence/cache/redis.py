"""Redis implementation of the cache store."""

from datetime import timedelta
from typing import Optional

import logfire
import redis.asyncio as redis
from redis.exceptions import RedisError

from blog.domain.repository.cache import CacheStore


def create_redis_client(redis_url: str) -> redis.Redis:
    """Create a Redis client returning decoded strings."""
    return redis.from_url(redis_url, decode_responses=True)


class RedisCacheStore(CacheStore):
    """Cache store backed by Redis.

    Redis errors are logged and swallowed so a cache outage degrades to
    reading from the primary store.
    """

    def __init__(self, client: redis.Redis) -> None:
        """Initialize cache store.

        Args:
            client: Redis client created with ``decode_responses=True``
        """
        self.client = client

    async def get(self, key: str) -> Optional[str]:
        """Return the cached value, or None on a miss or Redis failure."""
        try:
            return await self.client.get(key)
        except RedisError as e:
            logfire.warn("Cache read failed", key=key, error=str(e))
            return None

    async def set(self, key: str, value: str, ttl: timedelta) -> None:
        """Store a value with an expiry."""
        try:
            await self.client.set(key, value, ex=ttl)
        except RedisError as e:
            logfire.warn("Cache write failed", key=key, error=str(e))

    async def remove(self, key: str) -> None:
        """Delete a key."""
        try:
            await self.client.delete(key)
        except RedisError as e:
            logfire.warn("Cache delete failed", key=key, error=str(e))
