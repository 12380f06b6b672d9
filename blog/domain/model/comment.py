"""Comment entity.

Comments are threaded replies on posts with a bounded nesting depth.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utc_now
from blog.domain.value import CommentId, PostId, UserId
from blog.domain.value.types import Username

MAX_CONTENT_LENGTH = 2000


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)

    The parent always belongs to the same post. Depth is computed once at
    creation and never changes.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_username: Username
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
