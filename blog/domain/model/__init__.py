"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.model.refresh_token import RefreshToken
from blog.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "RefreshToken",
]
