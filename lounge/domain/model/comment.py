"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post (optionally a reply to another comment)."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=5000)
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
