"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_depth_policy import CommentDepthPolicy
from .comment_service import CommentService
from .comment_tree_service import (
    CommentTreeService,
    build_comment_tree,
    comment_tree_cache_key,
)
from .post_service import PostService, post_cache_key
from .token_service import TokenService
from .user_service import UserService, user_cache_key

__all__ = [
    "AuthService",
    "CommentDepthPolicy",
    "CommentService",
    "CommentTreeService",
    "PostService",
    "Service",
    "TokenService",
    "UserService",
    "build_comment_tree",
    "comment_tree_cache_key",
    "post_cache_key",
    "user_cache_key",
]
