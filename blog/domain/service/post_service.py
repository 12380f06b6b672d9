"""Post domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError

from blog.config import CacheSettings
from blog.domain.error import InvalidArgumentError, NotAuthorizedError, NotFoundError
from blog.domain.model import Post
from blog.domain.model.common import utc_now
from blog.domain.repository import CacheStore, PostRepository
from blog.domain.value import PostId, UserId

from .base import Service
from .comment_tree_service import POST_NOT_FOUND_MESSAGE, comment_tree_cache_key

MAX_TITLE_LENGTH = 300
MAX_PAGE_SIZE = 100


def post_cache_key(post_id: PostId) -> str:
    """Cache key holding a single post."""
    return f"post:{post_id}"


def _validate_post(title: str, content: str) -> None:
    if not title or not title.strip():
        raise InvalidArgumentError("Post title is required")
    if len(title) > MAX_TITLE_LENGTH:
        raise InvalidArgumentError(
            f"Post title must not exceed {MAX_TITLE_LENGTH} characters"
        )
    if not content or not content.strip():
        raise InvalidArgumentError("Post content is required")


def _validate_page(page: int, page_size: int) -> None:
    if page < 1:
        raise InvalidArgumentError("Page must be at least 1")
    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise InvalidArgumentError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")


class PostService(Service):
    """Domain service for post operations.

    Single posts are read through the cache. Updates and deletes drop the
    cached post; deletes also drop the post's cached comment tree.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        cache: CacheStore,
        cache_settings: CacheSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            cache: Cache store for posts and comment trees
            cache_settings: Cache settings (post TTL)
        """
        self.post_repository = post_repository
        self.cache = cache
        self.cache_ttl = cache_settings.post_ttl

    async def create_post(self, author_id: UserId, title: str, content: str) -> Post:
        """Create a post.

        Raises:
            InvalidArgumentError: If the title or content is empty or too long
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            _validate_post(title, content)

            now = utc_now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), author_id=str(author_id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID, read through the cache.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            key = post_cache_key(post_id)

            cached = await self.cache.get(key)
            if cached is not None:
                try:
                    return Post.model_validate_json(cached)
                except ValidationError as e:
                    logfire.warn("Discarding unreadable cached post", key=key, error=str(e))

            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id), POST_NOT_FOUND_MESSAGE)

            await self.cache.set(key, post.model_dump_json(), self.cache_ttl)
            return post

    async def list_posts(
        self,
        page: int = 1,
        page_size: int = 10,
        author_id: UserId | None = None,
    ) -> tuple[list[Post], int]:
        """List posts newest first, one page at a time.

        Args:
            page: 1-based page number
            page_size: Posts per page
            author_id: Only list posts written by this user

        Returns:
            The requested page and the total number of matching posts

        Raises:
            InvalidArgumentError: If page or page_size is out of range
        """
        with logfire.span(
            "post_service.list_posts",
            page=page,
            page_size=page_size,
            author_id=str(author_id) if author_id else None,
        ):
            _validate_page(page, page_size)

            total = await self.post_repository.count(author_id=author_id)
            posts = await self.post_repository.find_all(
                author_id=author_id,
                limit=page_size,
                offset=(page - 1) * page_size,
            )
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def update_post(
        self, post_id: PostId, user_id: UserId, title: str, content: str
    ) -> Post:
        """Replace the title and content of a post owned by the user.

        Raises:
            InvalidArgumentError: If the title or content is empty or too long
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            _validate_post(title, content)

            post = await self._get_owned_post(post_id, user_id, "edit")
            updated = post.model_copy(
                update={"title": title, "content": content, "updated_at": utc_now()}
            )
            saved = await self.post_repository.save(updated)
            await self.cache.remove(post_cache_key(post_id))
            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post owned by the user, along with all of its comments.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            await self._get_owned_post(post_id, user_id, "delete")

            await self.post_repository.delete(post_id)
            await self.cache.remove(post_cache_key(post_id))
            await self.cache.remove(comment_tree_cache_key(post_id))
            logfire.info("Post deleted", post_id=str(post_id))

    async def _get_owned_post(
        self, post_id: PostId, user_id: UserId, action: str
    ) -> Post:
        # Ownership is checked against the store, never the cache
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id), POST_NOT_FOUND_MESSAGE)

        if post.author_id != user_id:
            logfire.warn(
                f"Unauthorized post {action} attempt",
                post_id=str(post_id),
                author_id=str(post.author_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post
