"""Create post use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, authenticate
from blog.domain.model import Post
from blog.domain.service import PostService, TokenService
from blog.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    access_token: str
    title: str
    content: str


class PostResponse(BaseModel):
    """A single post as returned to clients."""

    post_id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author_id=str(post.author_id),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a new post."""

    def __init__(self, token_service: TokenService, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            token_service: Access token domain service
            post_service: Post domain service
        """
        self.token_service = token_service
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Raises:
            UnauthorizedError: If the access token is not valid
            InvalidArgumentError: If the title or content is empty or too long
        """
        claims = authenticate(self.token_service, request.access_token)

        post = await self.post_service.create_post(
            author_id=UserId(claims.user_id),
            title=request.title,
            content=request.content,
        )
        return PostResponse.from_post(post)
