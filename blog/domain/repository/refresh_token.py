"""Refresh token repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from blog.domain.model.refresh_token import RefreshToken


class RefreshTokenRepository(ABC):
    """Repository for persisted refresh tokens.

    Records are never deleted through this contract; revocation only
    stamps ``revoked_at``.
    """

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[RefreshToken]:
        """Find a refresh token by its secret, with the owning user embedded.

        Args:
            token: The opaque refresh secret

        Returns:
            The record (``user`` populated when the owner exists), None otherwise
        """
        pass

    @abstractmethod
    async def save(self, refresh_token: RefreshToken) -> RefreshToken:
        """Persist a new refresh token record.

        Args:
            refresh_token: The record to store

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    async def mark_revoked(self, token: str, revoked_at: datetime) -> bool:
        """Stamp ``revoked_at`` on the record holding this secret.

        A record that is already revoked keeps its original timestamp.

        Args:
            token: The opaque refresh secret
            revoked_at: Revocation time

        Returns:
            True if a record was found, False otherwise
        """
        pass
