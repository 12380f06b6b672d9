"""Comment tree construction."""

from collections import defaultdict

import logfire
from pydantic import TypeAdapter, ValidationError

from blog.config import CommentSettings
from blog.domain.error import NotFoundError
from blog.domain.model import Comment
from blog.domain.repository import CacheStore, CommentRepository, PostRepository
from blog.domain.value import CommentAuthor, CommentId, CommentTreeNode, PostId

from .base import Service

POST_NOT_FOUND_MESSAGE = "Post not found."

_tree_adapter = TypeAdapter(list[CommentTreeNode])


def comment_tree_cache_key(post_id: PostId) -> str:
    """Cache key holding the serialized comment tree of a post."""
    return f"comments:tree:{post_id}"


def _sibling_order(node: CommentTreeNode) -> tuple:
    return (node.created_at, str(node.id))


def _to_node(comment: Comment, replies: list[CommentTreeNode]) -> CommentTreeNode:
    return CommentTreeNode(
        id=comment.id,
        content=comment.content,
        author=CommentAuthor(id=comment.author_id, username=str(comment.author_username)),
        parent_id=comment.parent_id,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        replies=replies,
    )


def build_comment_tree(comments: list[Comment]) -> list[CommentTreeNode]:
    """Nest a flat list of comments into reply trees.

    Only comments without a parent become roots. Siblings are ordered newest
    first with the id as a tiebreaker. A comment whose id already appears
    among its own ancestors is emitted without replies, so malformed
    (cyclic) data always terminates.

    Expansion walks an explicit stack, so arbitrarily long reply chains
    never hit the interpreter's recursion limit.

    Args:
        comments: Every comment of one post, in any order

    Returns:
        Root nodes with their replies nested recursively
    """
    children: dict[CommentId | None, list[Comment]] = defaultdict(list)
    for comment in comments:
        children[comment.parent_id].append(comment)

    roots: list[CommentTreeNode] = []
    # Ids on the path from the current root down to the top of the stack
    path: set[CommentId] = set()

    for root in children[None]:
        stack = [(root, iter(children[root.id]), [])]
        path.add(root.id)

        while stack:
            comment, pending, replies = stack[-1]
            child = next(pending, None)

            if child is not None:
                if child.id in path:
                    replies.append(_to_node(child, []))
                else:
                    path.add(child.id)
                    stack.append((child, iter(children[child.id]), []))
                continue

            stack.pop()
            path.discard(comment.id)
            replies.sort(key=_sibling_order, reverse=True)
            node = _to_node(comment, replies)
            if stack:
                stack[-1][2].append(node)
            else:
                roots.append(node)

    roots.sort(key=_sibling_order, reverse=True)
    return roots


class CommentTreeService(Service):
    """Builds the threaded view of a post's comments, read through the cache."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        cache: CacheStore,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment tree service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            cache: Cache store for built trees
            comment_settings: Comment settings (tree cache TTL)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.cache = cache
        self.cache_ttl = comment_settings.tree_cache_ttl

    async def build_tree(self, post_id: PostId) -> list[CommentTreeNode]:
        """Return the comment tree of a post.

        A non-empty cached tree is returned as-is; staleness up to the cache
        TTL is accepted.

        Args:
            post_id: Post ID

        Returns:
            Root comment nodes with nested replies

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_tree_service.build_tree", post_id=str(post_id)):
            key = comment_tree_cache_key(post_id)

            cached = await self._read_cached_tree(key)
            if cached:
                logfire.info(
                    "Comment tree served from cache",
                    post_id=str(post_id),
                    root_count=len(cached),
                )
                return cached

            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id), POST_NOT_FOUND_MESSAGE)

            comments = await self.comment_repository.find_by_post(post_id)
            tree = build_comment_tree(comments)

            await self._write_cached_tree(key, tree)
            logfire.info(
                "Comment tree built",
                post_id=str(post_id),
                comment_count=len(comments),
                root_count=len(tree),
            )
            return tree

    async def _read_cached_tree(self, key: str) -> list[CommentTreeNode] | None:
        payload = await self.cache.get(key)
        if payload is None:
            return None
        try:
            return _tree_adapter.validate_json(payload)
        except ValidationError as e:
            logfire.warn("Discarding unreadable cached comment tree", key=key, error=str(e))
            return None

    async def _write_cached_tree(self, key: str, tree: list[CommentTreeNode]) -> None:
        try:
            payload = _tree_adapter.dump_json(tree).decode("utf-8")
        except (ValueError, RecursionError) as e:
            # Pathologically deep trees are served uncached
            logfire.warn("Comment tree not cacheable", key=key, error=str(e))
            return
        await self.cache.set(key, payload, self.cache_ttl)
