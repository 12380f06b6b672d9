"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel, utc_now
from blog.domain.value import UserId, UserRole, UserSummary
from blog.domain.value.types import Username


class User(DomainModel):
    """User aggregate root.

    Users sign in with a username and password. Inactive users keep their
    data but can neither log in nor refresh tokens.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    name: str = Field(min_length=1, max_length=200)
    password_hash: str = Field(repr=False)
    role: UserRole = UserRole.USER
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def to_summary(self) -> UserSummary:
        return UserSummary(
            id=self.id,
            username=str(self.username),
            email=self.email,
            name=self.name,
            role=self.role.value,
        )
