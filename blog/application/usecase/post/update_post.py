"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, authenticate
from blog.application.usecase.post.create_post import PostResponse
from blog.domain.service import PostService, TokenService
from blog.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    access_token: str
    post_id: UUID
    title: str
    content: str


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing one's own post."""

    def __init__(self, token_service: TokenService, post_service: PostService) -> None:
        self.token_service = token_service
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Raises:
            UnauthorizedError: If the access token is not valid
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is not the author
        """
        claims = authenticate(self.token_service, request.access_token)

        post = await self.post_service.update_post(
            post_id=PostId(request.post_id),
            user_id=UserId(claims.user_id),
            title=request.title,
            content=request.content,
        )
        return PostResponse.from_post(post)
