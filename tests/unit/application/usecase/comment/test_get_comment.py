"""Unit tests for GetCommentUseCase and GetRepliesUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetRepliesUseCase,
)
from blog.domain.error import NotFoundError
from blog.domain.repository import PostRepository
from blog.domain.service import AuthService
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentUseCases:
    """Reading single comments and their direct replies."""

    @pytest.mark.asyncio
    async def test_get_comment_and_direct_replies(self, unit_env: AsyncContainer):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        create = await unit_env.get(CreateCommentUseCase)
        get_comment = await unit_env.get(GetCommentUseCase)
        get_replies = await unit_env.get(GetRepliesUseCase)
        post_repo = await unit_env.get(PostRepository)
        tokens = await auth_service.register(
            "alice", "alice@example.com", "Alice", "s3cret!"
        )
        token = tokens.access_token
        post = await post_repo.save(make_post())
        root = await create.execute(
            CreateCommentRequest(access_token=token, post_id=post.id, content="root")
        )
        first = await create.execute(
            CreateCommentRequest(
                access_token=token,
                post_id=post.id,
                content="first",
                parent_id=root.comment_id,
            )
        )
        await create.execute(
            CreateCommentRequest(
                access_token=token,
                post_id=post.id,
                content="nested",
                parent_id=first.comment_id,
            )
        )

        # Act
        fetched = await get_comment.execute(
            GetCommentRequest(comment_id=root.comment_id)
        )
        replies = await get_replies.execute(
            GetCommentRequest(comment_id=root.comment_id)
        )

        # Assert
        assert fetched == root
        assert replies.comment_id == root.comment_id
        assert [reply.content for reply in replies.replies] == ["first"]

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env: AsyncContainer):
        get_comment = await unit_env.get(GetCommentUseCase)
        get_replies = await unit_env.get(GetRepliesUseCase)

        with pytest.raises(NotFoundError):
            await get_comment.execute(GetCommentRequest(comment_id=uuid4()))
        with pytest.raises(NotFoundError):
            await get_replies.execute(GetCommentRequest(comment_id=uuid4()))
