"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first, optionally only those of one author.

        Args:
            author_id: Restrict to posts written by this user
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            One page of posts ordered by creation time, newest first
        """
        pass

    @abstractmethod
    async def count(self, author_id: Optional[UserId] = None) -> int:
        """Count posts, optionally only those of one author."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post together with all of its comments."""
        pass
