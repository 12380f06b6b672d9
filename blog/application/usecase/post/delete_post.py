"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, authenticate
from blog.domain.service import PostService, TokenService
from blog.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    access_token: str
    post_id: UUID


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting one's own post together with its comments."""

    def __init__(self, token_service: TokenService, post_service: PostService) -> None:
        self.token_service = token_service
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            UnauthorizedError: If the access token is not valid
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is not the author
        """
        claims = authenticate(self.token_service, request.access_token)
        await self.post_service.delete_post(
            PostId(request.post_id), UserId(claims.user_id)
        )
