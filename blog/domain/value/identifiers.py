"""Strongly typed identifiers for blog domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
RefreshTokenId = NewType("RefreshTokenId", UUID)
