"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
"""

import re
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from blog.domain.value.common import RootValueObject, ValueObject
from blog.domain.value.identifiers import CommentId, UserId


class UserRole(str, Enum):
    """Role carried in access tokens."""

    USER = "User"
    ADMIN = "Admin"


class Username(RootValueObject[str]):
    """Login name.

    3-100 characters of letters, digits, underscores and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.fullmatch(r"[a-zA-Z0-9_-]{3,100}", v):
            raise ValueError(
                "Username must be 3-100 characters of letters, digits, "
                "underscores or hyphens"
            )
        return v


class CommentAuthor(ValueObject):
    """Author reference shown on a comment tree node."""

    id: UserId
    username: str


class CommentTreeNode(ValueObject):
    """A comment with its replies nested beneath it.

    Built on demand for reading; never persisted.
    """

    id: CommentId
    content: str
    author: CommentAuthor
    parent_id: Optional[CommentId] = None
    created_at: datetime
    updated_at: datetime
    replies: List["CommentTreeNode"] = Field(default_factory=list)


class UserSummary(ValueObject):
    """Public view of a user account."""

    id: UserId
    username: str
    email: str
    name: str
    role: str


class AuthTokens(ValueObject):
    """Credentials returned after a successful sign-in or refresh."""

    access_token: str
    refresh_token: str
    refresh_token_expires_at: datetime
    user: UserSummary
