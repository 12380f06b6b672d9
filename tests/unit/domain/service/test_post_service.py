"""Unit tests for PostService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from blog.domain.error import InvalidArgumentError, NotAuthorizedError, NotFoundError
from blog.domain.model import Post
from blog.domain.repository import CacheStore, CommentRepository, PostRepository
from blog.domain.service import PostService, comment_tree_cache_key, post_cache_key
from blog.domain.value import PostId, UserId
from tests.factories import BASE_TIME, make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _post_at(author_id: UserId, minutes: int) -> Post:
    created = BASE_TIME + timedelta(minutes=minutes)
    return Post(
        id=PostId(uuid4()),
        title=f"Post {minutes}",
        content="Body",
        author_id=author_id,
        created_at=created,
        updated_at=created,
    )


class TestCreateAndGetPost:
    """Tests for create_post and get_post."""

    @pytest.mark.asyncio
    async def test_create_post_persists(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())

        # Act
        post = await post_service.create_post(author_id, "Hello", "World")

        # Assert
        stored = await post_repo.find_by_id(post.id)
        assert stored == post
        assert post.author_id == author_id
        assert post.created_at == post.updated_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title, content",
        [("", "body"), ("   ", "body"), ("x" * 301, "body"), ("Title", " ")],
    )
    async def test_create_post_rejects_invalid_fields(self, unit_env, title, content):
        post_service = await unit_env.get(PostService)

        with pytest.raises(InvalidArgumentError):
            await post_service.create_post(UserId(uuid4()), title, content)

    @pytest.mark.asyncio
    async def test_get_post_reads_through_cache(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        cache = await unit_env.get(CacheStore)
        post = await post_service.create_post(UserId(uuid4()), "Hello", "World")

        # Act
        fetched = await post_service.get_post(post.id)

        # Assert
        assert fetched == post
        cached = await cache.get(post_cache_key(post.id))
        assert cached is not None
        assert Post.model_validate_json(cached) == post

    @pytest.mark.asyncio
    async def test_get_unknown_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found."):
            await post_service.get_post(PostId(uuid4()))


class TestListPosts:
    """Tests for list_posts."""

    @pytest.mark.asyncio
    async def test_pages_newest_first_with_total(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        posts = [await post_repo.save(_post_at(author_id, m)) for m in range(5)]

        # Act
        first_page, total = await post_service.list_posts(page=1, page_size=2)
        last_page, _ = await post_service.list_posts(page=3, page_size=2)

        # Assert
        assert total == 5
        assert [p.id for p in first_page] == [posts[4].id, posts[3].id]
        assert [p.id for p in last_page] == [posts[0].id]

    @pytest.mark.asyncio
    async def test_filter_by_author(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice, bob = UserId(uuid4()), UserId(uuid4())
        await post_repo.save(_post_at(alice, 0))
        bobs = await post_repo.save(_post_at(bob, 1))
        await post_repo.save(_post_at(alice, 2))

        posts, total = await post_service.list_posts(author_id=bob)

        assert total == 1
        assert [p.id for p in posts] == [bobs.id]

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(_post_at(UserId(uuid4()), 0))

        posts, total = await post_service.list_posts(page=5, page_size=10)

        assert posts == []
        assert total == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0), (1, 101)])
    async def test_rejects_out_of_range_paging(self, unit_env, page, page_size):
        post_service = await unit_env.get(PostService)

        with pytest.raises(InvalidArgumentError):
            await post_service.list_posts(page=page, page_size=page_size)


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_author_can_update(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        cache = await unit_env.get(CacheStore)
        author_id = UserId(uuid4())
        post = await post_service.create_post(author_id, "Draft", "Old body")
        await post_service.get_post(post.id)

        # Act
        updated = await post_service.update_post(post.id, author_id, "Final", "New")

        # Assert
        assert updated.title == "Final"
        assert updated.content == "New"
        assert updated.created_at == post.created_at
        assert await cache.get(post_cache_key(post.id)) is None
        assert await post_service.get_post(post.id) == updated

    @pytest.mark.asyncio
    async def test_other_user_cannot_update(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), "Mine", "Body")

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, UserId(uuid4()), "Yours", "Body")

    @pytest.mark.asyncio
    async def test_update_unknown_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.update_post(
                PostId(uuid4()), UserId(uuid4()), "Title", "Body"
            )


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_delete_cascades_and_drops_cached_views(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_repo = await unit_env.get(CommentRepository)
        cache = await unit_env.get(CacheStore)
        author_id = UserId(uuid4())
        post = await post_service.create_post(author_id, "Doomed", "Body")
        root = await comment_repo.save(make_comment(post.id))
        await comment_repo.save(make_comment(post.id, parent=root, minutes=1))
        await post_service.get_post(post.id)
        await cache.set(comment_tree_cache_key(post.id), "[]", timedelta(minutes=5))

        # Act
        await post_service.delete_post(post.id, author_id)

        # Assert
        with pytest.raises(NotFoundError):
            await post_service.get_post(post.id)
        assert await comment_repo.find_by_post(post.id) == []
        assert await cache.get(comment_tree_cache_key(post.id)) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.create_post(UserId(uuid4()), "Mine", "Body")

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, UserId(uuid4()))

        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_delete_unknown_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId(uuid4()), UserId(uuid4()))
