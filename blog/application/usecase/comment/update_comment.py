"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, authenticate
from blog.application.usecase.comment.create_comment import CommentResponse
from blog.domain.service import CommentService, TokenService
from blog.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    access_token: str
    comment_id: UUID
    content: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing the content of one's own comment."""

    def __init__(
        self, token_service: TokenService, comment_service: CommentService
    ) -> None:
        """Initialize update comment use case.

        Args:
            token_service: Access token domain service
            comment_service: Comment domain service
        """
        self.token_service = token_service
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Raises:
            UnauthorizedError: If the access token is not valid
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
        """
        claims = authenticate(self.token_service, request.access_token)

        comment = await self.comment_service.update_comment(
            comment_id=CommentId(request.comment_id),
            user_id=UserId(claims.user_id),
            content=request.content,
        )
        return CommentResponse.from_comment(comment)
