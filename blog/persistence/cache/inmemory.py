"""In-memory cache store for testing."""

import time
from datetime import timedelta
from typing import Callable, Optional

from blog.domain.repository.cache import CacheStore


class InMemoryCacheStore(CacheStore):
    """Dict-backed cache store honouring TTLs."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, tuple[str, float]] = {}
        self._clock = clock

    async def get(self, key: str) -> Optional[str]:
        """Return the cached value unless it has expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl: timedelta) -> None:
        """Store a value that expires after ``ttl``."""
        self._entries[key] = (value, self._clock() + ttl.total_seconds())

    async def remove(self, key: str) -> None:
        """Drop a key if present."""
        self._entries.pop(key, None)
