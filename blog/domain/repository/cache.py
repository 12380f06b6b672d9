"""Distributed cache interface."""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional


class CacheStore(ABC):
    """Key/value cache for read paths.

    Implementations are fail-open: backend errors surface as a miss on
    ``get`` and as a no-op on ``set`` and ``remove``.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the cached value, or None on a miss."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl: timedelta) -> None:
        """Store a value that expires after ``ttl``."""
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Drop a key if present."""
        pass
