"""Domain value objects for the blog."""

from blog.domain.value.identifiers import (
    CommentId,
    PostId,
    RefreshTokenId,
    UserId,
)
from blog.domain.value.types import (
    AuthTokens,
    CommentAuthor,
    CommentTreeNode,
    Username,
    UserRole,
    UserSummary,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "RefreshTokenId",
    # Types
    "AuthTokens",
    "CommentAuthor",
    "CommentTreeNode",
    "Username",
    "UserRole",
    "UserSummary",
]
