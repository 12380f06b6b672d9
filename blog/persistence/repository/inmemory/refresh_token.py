"""In-memory refresh token repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.refresh_token import RefreshToken
from blog.domain.repository.refresh_token import RefreshTokenRepository
from blog.domain.repository.user import UserRepository


class InMemoryRefreshTokenRepository(RefreshTokenRepository):
    """In-memory implementation of RefreshTokenRepository for testing.

    Owners are looked up in the given user repository when reading.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._tokens: dict[str, RefreshToken] = {}
        self._user_repository = user_repository

    async def find_by_token(self, token: str) -> Optional[RefreshToken]:
        """Find a refresh token by secret, embedding the owning user."""
        record = self._tokens.get(token)
        if record is None:
            return None
        user = await self._user_repository.find_by_id(record.user_id)
        return record.model_copy(update={"user": user})

    async def save(self, refresh_token: RefreshToken) -> RefreshToken:
        """Store a refresh token record."""
        self._tokens[refresh_token.token] = refresh_token.model_copy(
            update={"user": None}
        )
        return refresh_token

    async def mark_revoked(self, token: str, revoked_at: datetime) -> bool:
        """Stamp revoked_at, keeping an earlier revocation."""
        record = self._tokens.get(token)
        if record is None:
            return False
        if record.revoked_at is None:
            self._tokens[token] = record.model_copy(update={"revoked_at": revoked_at})
        return True
