"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from blog.domain.model import Comment, Post, User
from blog.domain.value import CommentId, PostId, UserId
from blog.domain.value.types import Username
from blog.util.password import hash_password

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_user(
    username: str = "alice",
    password: str = "s3cret!",
    is_active: bool = True,
) -> User:
    """Build a user with a real (cheap) bcrypt hash."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.com",
        name=username.title(),
        password_hash=hash_password(password, rounds=4),
        is_active=is_active,
    )


def make_post(author_id: UserId | None = None) -> Post:
    """Build a post."""
    return Post(
        id=PostId(uuid4()),
        title="Hello world",
        content="First post",
        author_id=author_id or UserId(uuid4()),
    )


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    minutes: int = 0,
    comment_id: CommentId | None = None,
    parent_id: CommentId | None = None,
    author_id: UserId | None = None,
    content: str = "A comment",
) -> Comment:
    """Build a comment created ``minutes`` after BASE_TIME.

    ``parent_id`` wins over ``parent`` so tests can build malformed links.
    """
    created = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=comment_id or CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        author_username=Username("commenter"),
        content=content,
        parent_id=parent_id or (parent.id if parent else None),
        depth=parent.depth + 1 if parent else 0,
        created_at=created,
        updated_at=created,
    )
