"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, authenticate
from blog.domain.model import Comment
from blog.domain.service import CommentService, TokenService
from blog.domain.value import CommentId, PostId, UserId
from blog.domain.value.types import Username


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    access_token: str
    post_id: UUID
    content: str
    parent_id: UUID | None = None  # Parent comment ID for replies


class CommentResponse(BaseModel):
    """A single comment as returned to clients."""

    comment_id: str
    post_id: str
    author_id: str
    author_username: str
    content: str
    parent_id: str | None
    depth: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_username=str(comment.author_username),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self, token_service: TokenService, comment_service: CommentService
    ) -> None:
        """Initialize create comment use case.

        Args:
            token_service: Access token domain service
            comment_service: Comment domain service
        """
        self.token_service = token_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Raises:
            UnauthorizedError: If the access token is not valid
            NotFoundError: If the post or parent comment does not exist
            DepthExceededError: If the reply would nest too deep
        """
        claims = authenticate(self.token_service, request.access_token)

        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            author_id=UserId(claims.user_id),
            author_username=Username(claims.username),
            content=request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )
        return CommentResponse.from_comment(comment)
