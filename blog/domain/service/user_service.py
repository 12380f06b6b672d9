"""User domain service."""

import logfire
from pydantic import ValidationError

from blog.config import CacheSettings
from blog.domain.error import NotFoundError
from blog.domain.repository import CacheStore, UserRepository
from blog.domain.value import UserId, UserSummary

from .base import Service


def user_cache_key(user_id: UserId) -> str:
    """Cache key holding the public summary of a user."""
    return f"user:{user_id}"


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(
        self,
        user_repository: UserRepository,
        cache: CacheStore,
        cache_settings: CacheSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            cache: Cache store for user summaries
            cache_settings: Cache settings (user TTL)
        """
        self.user_repository = user_repository
        self.cache = cache
        self.cache_ttl = cache_settings.user_ttl

    async def get_user(self, user_id: UserId) -> UserSummary:
        """Get the public summary of a user, read through the cache.

        Args:
            user_id: User ID

        Returns:
            User summary

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_user", user_id=str(user_id)):
            key = user_cache_key(user_id)

            cached = await self.cache.get(key)
            if cached is not None:
                try:
                    return UserSummary.model_validate_json(cached)
                except ValidationError as e:
                    logfire.warn("Discarding unreadable cached user", key=key, error=str(e))

            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id), "User not found.")

            summary = user.to_summary()
            await self.cache.set(key, summary.model_dump_json(), self.cache_ttl)
            return summary
