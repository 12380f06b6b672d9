"""Get comment and get replies use cases."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.create_comment import CommentResponse
from blog.domain.service import CommentService
from blog.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: UUID


class GetRepliesResponse(BaseModel):
    """Direct replies to a comment, newest first."""

    comment_id: str
    replies: list[CommentResponse]


class GetCommentUseCase(BaseUseCase):
    """Use case for reading a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        return CommentResponse.from_comment(comment)


class GetRepliesUseCase(BaseUseCase):
    """Use case for reading the direct replies to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        replies = await self.comment_service.get_replies(CommentId(request.comment_id))
        return GetRepliesResponse(
            comment_id=str(request.comment_id),
            replies=[CommentResponse.from_comment(reply) for reply in replies],
        )
