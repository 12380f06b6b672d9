"""Reply depth rules for threaded comments."""

import logfire

from blog.config import CommentSettings
from blog.domain.error import DepthExceededError, NotFoundError
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId

from .base import Service

PARENT_NOT_FOUND_MESSAGE = "Parent comment not found on this post."


class CommentDepthPolicy(Service):
    """Decides whether a reply is allowed and at which depth it sits.

    The check is not atomic with the subsequent insert. Two concurrent
    replies can both pass against the same parent.
    """

    def __init__(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> None:
        """Initialize depth policy.

        Args:
            comment_repository: Comment repository
            comment_settings: Comment settings (maximum depth)
        """
        self.comment_repository = comment_repository
        self.max_depth = comment_settings.max_depth

    async def validate_and_compute_depth(
        self, post_id: PostId, parent_id: CommentId | None = None
    ) -> int:
        """Compute the depth a new comment would have.

        Args:
            post_id: Post the comment is being added to
            parent_id: Comment being replied to (None for a root comment)

        Returns:
            0 for roots, parent depth + 1 for replies

        Raises:
            NotFoundError: If the parent is missing or belongs to another post
            DepthExceededError: If the parent is already at the maximum depth
        """
        if parent_id is None:
            return 0

        with logfire.span(
            "comment_depth_policy.validate_and_compute_depth",
            post_id=str(post_id),
            parent_id=str(parent_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None:
                logfire.warn("Parent comment not found", parent_id=str(parent_id))
                raise NotFoundError(
                    "Comment", str(parent_id), PARENT_NOT_FOUND_MESSAGE
                )
            if parent.post_id != post_id:
                logfire.warn(
                    "Parent comment does not belong to post",
                    parent_id=str(parent_id),
                    parent_post_id=str(parent.post_id),
                    target_post_id=str(post_id),
                )
                raise NotFoundError(
                    "Comment", str(parent_id), PARENT_NOT_FOUND_MESSAGE
                )
            if parent.depth >= self.max_depth:
                logfire.warn(
                    "Reply depth limit reached",
                    parent_id=str(parent_id),
                    parent_depth=parent.depth,
                    max_depth=self.max_depth,
                )
                raise DepthExceededError(self.max_depth)

            return parent.depth + 1
