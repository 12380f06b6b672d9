"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

from uuid import UUID, uuid4

from dishka import AsyncContainer
import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.error import InvalidArgumentError, NotFoundError, UnauthorizedError
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.service import AuthService
from blog.domain.value import CommentId
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _access_token(container: AsyncContainer, username: str = "alice") -> str:
    auth_service = await container.get(AuthService)
    tokens = await auth_service.register(
        username, f"{username}@example.com", username.title(), "s3cret!"
    )
    return tokens.access_token


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_changes_content_only(self, unit_env: AsyncContainer):
        """Editing keeps the thread position and creation time."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        token = await _access_token(unit_env)
        post = await post_repo.save(make_post())
        root = await create.execute(
            CreateCommentRequest(access_token=token, post_id=post.id, content="root")
        )
        reply = await create.execute(
            CreateCommentRequest(
                access_token=token,
                post_id=post.id,
                content="typo",
                parent_id=root.comment_id,
            )
        )

        # Act
        edited = await update.execute(
            UpdateCommentRequest(
                access_token=token, comment_id=reply.comment_id, content="fixed"
            )
        )

        # Assert
        assert edited.content == "fixed"
        assert edited.parent_id == root.comment_id
        assert edited.depth == 1
        assert edited.created_at == reply.created_at
        assert edited.updated_at >= reply.updated_at

    @pytest.mark.asyncio
    async def test_update_is_visible_in_tree(self, unit_env: AsyncContainer):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        get_tree = await unit_env.get(GetCommentTreeUseCase)
        post_repo = await unit_env.get(PostRepository)
        token = await _access_token(unit_env)
        post = await post_repo.save(make_post())
        comment = await create.execute(
            CreateCommentRequest(access_token=token, post_id=post.id, content="old")
        )
        # Warm the cache
        await get_tree.execute(GetCommentTreeRequest(post_id=post.id))

        # Act
        await update.execute(
            UpdateCommentRequest(
                access_token=token, comment_id=comment.comment_id, content="new"
            )
        )
        response = await get_tree.execute(GetCommentTreeRequest(post_id=post.id))

        # Assert
        assert [node.content for node in response.comments] == ["new"]

    @pytest.mark.asyncio
    async def test_update_unknown_comment(self, unit_env: AsyncContainer):
        update = await unit_env.get(UpdateCommentUseCase)
        token = await _access_token(unit_env)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateCommentRequest(
                    access_token=token, comment_id=uuid4(), content="anything"
                )
            )

    @pytest.mark.asyncio
    async def test_update_rejects_blank_content(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        token = await _access_token(unit_env)
        post = await post_repo.save(make_post())
        comment = await create.execute(
            CreateCommentRequest(access_token=token, post_id=post.id, content="text")
        )

        with pytest.raises(InvalidArgumentError):
            await update.execute(
                UpdateCommentRequest(
                    access_token=token, comment_id=comment.comment_id, content="  "
                )
            )

    @pytest.mark.asyncio
    async def test_update_requires_valid_token(self, unit_env: AsyncContainer):
        update = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(UnauthorizedError):
            await update.execute(
                UpdateCommentRequest(
                    access_token="garbage", comment_id=uuid4(), content="text"
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_removes_replies(self, unit_env: AsyncContainer):
        """Deleting a comment takes its whole subtree with it."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        get_tree = await unit_env.get(GetCommentTreeUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        token = await _access_token(unit_env)
        post = await post_repo.save(make_post())
        keep = await create.execute(
            CreateCommentRequest(access_token=token, post_id=post.id, content="keep")
        )
        doomed = await create.execute(
            CreateCommentRequest(access_token=token, post_id=post.id, content="doomed")
        )
        reply = await create.execute(
            CreateCommentRequest(
                access_token=token,
                post_id=post.id,
                content="reply",
                parent_id=doomed.comment_id,
            )
        )

        # Act
        await delete.execute(
            DeleteCommentRequest(access_token=token, comment_id=doomed.comment_id)
        )

        # Assert
        response = await get_tree.execute(GetCommentTreeRequest(post_id=post.id))
        assert [str(node.id) for node in response.comments] == [keep.comment_id]
        assert await comment_repo.find_by_id(CommentId(UUID(reply.comment_id))) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_comment(self, unit_env: AsyncContainer):
        delete = await unit_env.get(DeleteCommentUseCase)
        token = await _access_token(unit_env)

        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteCommentRequest(access_token=token, comment_id=uuid4())
            )
