"""Comment domain service."""

from uuid import uuid4

import logfire

from blog.domain.error import InvalidArgumentError, NotAuthorizedError, NotFoundError
from blog.domain.model import Comment
from blog.domain.model.comment import MAX_CONTENT_LENGTH
from blog.domain.model.common import utc_now
from blog.domain.repository import CacheStore, CommentRepository, PostRepository
from blog.domain.value import CommentId, PostId, UserId
from blog.domain.value.types import Username

from .base import Service
from .comment_depth_policy import CommentDepthPolicy
from .comment_tree_service import POST_NOT_FOUND_MESSAGE, comment_tree_cache_key

COMMENT_NOT_FOUND_MESSAGE = "Comment not found."


def _validate_content(content: str) -> str:
    if not content or not content.strip():
        raise InvalidArgumentError("Comment content is required")
    if len(content) > MAX_CONTENT_LENGTH:
        raise InvalidArgumentError(
            f"Comment content must not exceed {MAX_CONTENT_LENGTH} characters"
        )
    return content


class CommentService(Service):
    """Domain service for comment operations.

    Every write drops the cached tree of the affected post.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        depth_policy: CommentDepthPolicy,
        cache: CacheStore,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            depth_policy: Reply depth rules
            cache: Cache store holding comment trees
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.depth_policy = depth_policy
        self.cache = cache

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        author_username: Username,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            author_username: Author username
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            InvalidArgumentError: If content is empty or too long
            NotFoundError: If the post or parent comment does not exist
            DepthExceededError: If the parent is already at the maximum depth
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            _validate_content(content)

            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id), POST_NOT_FOUND_MESSAGE)

            depth = await self.depth_policy.validate_and_compute_depth(
                post_id, parent_id
            )

            now = utc_now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                author_username=author_username,
                content=content,
                parent_id=parent_id,
                depth=depth,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            await self.cache.remove(comment_tree_cache_key(post_id))
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError(
                    "Comment", str(comment_id), COMMENT_NOT_FOUND_MESSAGE
                )
            return comment

    async def get_replies(self, comment_id: CommentId) -> list[Comment]:
        """Get the direct replies to a comment, newest first.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_replies", comment_id=str(comment_id)):
            await self.get_comment(comment_id)
            replies = await self.comment_repository.find_children(comment_id)
            logfire.info(
                "Replies retrieved", comment_id=str(comment_id), count=len(replies)
            )
            return replies

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Replace the content of a comment owned by the user.

        Args:
            comment_id: Comment ID
            user_id: User requesting the edit
            content: New comment text

        Returns:
            Updated comment

        Raises:
            InvalidArgumentError: If content is empty or too long
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
            content_length=len(content) if content else 0,
        ):
            _validate_content(content)

            comment = await self.get_comment(comment_id)
            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    author_id=str(comment.author_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            updated = comment.model_copy(
                update={"content": content, "updated_at": utc_now()}
            )
            saved = await self.comment_repository.save(updated)
            await self.cache.remove(comment_tree_cache_key(comment.post_id))
            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )
            return saved

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment owned by the user, along with its replies.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    author_id=str(comment.author_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            await self.comment_repository.delete(comment_id)
            await self.cache.remove(comment_tree_cache_key(comment.post_id))
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )
