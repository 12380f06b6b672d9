"""Get comment tree use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import CommentTreeService
from blog.domain.value import CommentTreeNode, PostId


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    post_id: UUID


class GetCommentTreeResponse(BaseModel):
    """Threaded comments of a post."""

    post_id: str
    comments: list[CommentTreeNode]


class GetCommentTreeUseCase(BaseUseCase):
    """Use case for reading the threaded comments of a post."""

    def __init__(self, comment_tree_service: CommentTreeService) -> None:
        self.comment_tree_service = comment_tree_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        tree = await self.comment_tree_service.build_tree(PostId(request.post_id))
        return GetCommentTreeResponse(post_id=str(request.post_id), comments=tree)
