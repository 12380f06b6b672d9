"""In-memory post repository for testing."""

from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Deleting a post removes its comments from the given comment repository.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        self._posts: dict[PostId, Post] = {}
        self._comment_repository = comment_repository

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts newest first with pagination."""
        posts = [
            p
            for p in self._posts.values()
            if author_id is None or p.author_id == author_id
        ]
        posts.sort(key=lambda p: (p.created_at, str(p.id)), reverse=True)
        return posts[offset : offset + limit]

    async def count(self, author_id: Optional[UserId] = None) -> int:
        """Count posts, optionally by author."""
        return sum(
            1
            for p in self._posts.values()
            if author_id is None or p.author_id == author_id
        )

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its comments."""
        self._posts.pop(post_id, None)
        for comment in await self._comment_repository.find_by_post(post_id):
            await self._comment_repository.delete(comment.id)
