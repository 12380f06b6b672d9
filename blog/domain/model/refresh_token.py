"""Refresh token record."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utc_now
from blog.domain.model.user import User
from blog.domain.value import RefreshTokenId, UserId


class RefreshToken(DomainModel):
    """Persisted refresh token.

    The only mutation after creation is setting ``revoked_at``. Repositories
    populate ``user`` with the owning account when reading by token.
    """

    id: RefreshTokenId
    token: str = Field(repr=False)
    user_id: UserId
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime
    revoked_at: Optional[datetime] = None
    user: Optional[User] = None

    @property
    def is_expired(self) -> bool:
        return self.expires_at <= utc_now()

    @property
    def is_revoked(self) -> bool:
        return self.revoked_at is not None

    @property
    def is_valid(self) -> bool:
        """True when neither revoked nor expired."""
        return not self.is_revoked and not self.is_expired
