"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic objects, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from blog.domain.model import Comment, Post, RefreshToken, User
from blog.domain.value import (
    CommentId,
    PostId,
    RefreshTokenId,
    UserId,
    UserRole,
)
from blog.domain.value.types import Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        name=row["name"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        depth=row["depth"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_refresh_token(
    row: Dict[str, Any], user: Optional[User] = None
) -> RefreshToken:
    """Convert database row to RefreshToken domain model.

    Args:
        row: Database row as dict
        user: Owning user to embed, if loaded

    Returns:
        RefreshToken domain model
    """
    return RefreshToken(
        id=RefreshTokenId(_uuid(row["id"])),
        token=row["token"],
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        revoked_at=row.get("revoked_at"),
        user=user,
    )


def refresh_token_to_dict(refresh_token: RefreshToken) -> Dict[str, Any]:
    """Convert RefreshToken domain model to database dict (without the user)."""
    return refresh_token.model_dump(exclude={"user"})
