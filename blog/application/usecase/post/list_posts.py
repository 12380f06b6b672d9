"""List posts use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.post.create_post import PostResponse
from blog.domain.service import PostService
from blog.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)
    author_id: UUID | None = None  # Only posts by this user


class ListPostsResponse(BaseModel):
    """One page of posts, newest first."""

    posts: list[PostResponse]
    total: int
    page: int
    page_size: int


class ListPostsUseCase(BaseUseCase):
    """Use case for paging through all posts or the posts of one user."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        posts, total = await self.post_service.list_posts(
            page=request.page,
            page_size=request.page_size,
            author_id=UserId(request.author_id) if request.author_id else None,
        )
        return ListPostsResponse(
            posts=[PostResponse.from_post(post) for post in posts],
            total=total,
            page=request.page,
            page_size=request.page_size,
        )
