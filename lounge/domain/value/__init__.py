"""Domain value objects for Fandom Lounge."""

from lounge.domain.value.identifiers import (
    CommentId,
    LoungeId,
    PostId,
    UserId,
    VoteId,
)
from lounge.domain.value.types import PostType, SearchScope, VotableType, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "LoungeId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "PostType",
    "SearchScope",
    "VotableType",
    "VoteType",
]
