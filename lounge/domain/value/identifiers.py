"""Strongly typed identifiers for Fandom Lounge domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
LoungeId = NewType("LoungeId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
