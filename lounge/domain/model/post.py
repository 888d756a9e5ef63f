"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import LoungeId, PostId, PostType, UserId


class Post(DomainModel):
    """Post aggregate root.

    Vote counters are denormalized onto the post and only change together
    with a vote write.
    """

    id: PostId
    lounge_id: LoungeId
    author_id: UserId
    author_nickname: str  # Denormalized from users
    type: PostType = PostType.TEXT
    title: Optional[str] = Field(default=None, max_length=200)
    content: str = Field(max_length=10000)
    tags: list[str] = Field(default_factory=list)
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
