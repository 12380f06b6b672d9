"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel, utc_now
from blog.domain.value import PostId, UserId


class Post(DomainModel):
    """Blog post. Comments hang off a post and are removed with it."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    author_id: UserId
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
