"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, authenticate
from blog.domain.service import CommentService, TokenService
from blog.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    access_token: str
    comment_id: UUID


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting one's own comment together with its replies."""

    def __init__(
        self, token_service: TokenService, comment_service: CommentService
    ) -> None:
        self.token_service = token_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            UnauthorizedError: If the access token is not valid
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
        """
        claims = authenticate(self.token_service, request.access_token)
        await self.comment_service.delete_comment(
            CommentId(request.comment_id), UserId(claims.user_id)
        )
