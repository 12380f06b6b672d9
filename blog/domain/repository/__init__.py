"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from blog.domain.repository.cache import CacheStore
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.refresh_token import RefreshTokenRepository
from blog.domain.repository.user import UserRepository

__all__ = [
    "CacheStore",
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "RefreshTokenRepository",
]
