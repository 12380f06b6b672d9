"""Unit tests for InMemoryCacheStore."""

from datetime import timedelta

import pytest

from blog.persistence.cache import InMemoryCacheStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryCacheStore:
    """Tests for TTL handling."""

    @pytest.mark.asyncio
    async def test_value_readable_until_ttl_elapses(self):
        # Arrange
        clock = FakeClock()
        cache = InMemoryCacheStore(clock=clock)
        await cache.set("key", "value", timedelta(minutes=5))

        # Act & Assert
        clock.now += 299
        assert await cache.get("key") == "value"
        clock.now += 1
        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_remove(self):
        cache = InMemoryCacheStore()
        await cache.set("key", "value", timedelta(minutes=5))

        await cache.remove("key")
        await cache.remove("missing")

        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_last_write_wins(self):
        cache = InMemoryCacheStore()

        await cache.set("key", "first", timedelta(minutes=5))
        await cache.set("key", "second", timedelta(minutes=5))

        assert await cache.get("key") == "second"
