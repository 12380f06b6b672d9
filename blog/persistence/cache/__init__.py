"""Cache store implementations."""

from .inmemory import InMemoryCacheStore
from .redis import RedisCacheStore, create_redis_client

__all__ = [
    "InMemoryCacheStore",
    "RedisCacheStore",
    "create_redis_client",
]
