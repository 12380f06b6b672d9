"""In-memory comment repository for testing."""

from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post."""
        return [c for c in self._comments.values() if c.post_id == post_id]

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment, newest first."""
        children = [c for c in self._comments.values() if c.parent_id == parent_id]
        children.sort(key=lambda c: (c.created_at, str(c.id)), reverse=True)
        return children

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and, like ON DELETE CASCADE, all of its replies."""
        pending = [comment_id]
        while pending:
            current = pending.pop()
            if self._comments.pop(current, None) is None:
                continue
            pending.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )
