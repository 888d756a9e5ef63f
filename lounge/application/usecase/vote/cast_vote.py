"""Cast vote use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from lounge.application.usecase.base import BaseUseCase, CamelModel
from lounge.domain.error import ValidationError
from lounge.domain.model import VoteTally
from lounge.domain.service import VoteService
from lounge.domain.value import CommentId, PostId, UserId, VotableType, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    vote_type: VoteType


class VoteTallyResponse(CamelModel):
    """Vote counters of an item plus the caller's vote."""

    upvote_count: int
    downvote_count: int
    user_vote: Optional[VoteType] = None

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "VoteTallyResponse":
        return cls(
            upvote_count=tally.upvote_count,
            downvote_count=tally.downvote_count,
            user_vote=tally.user_vote,
        )


def parse_votable_id(
    votable_type: VotableType, votable_id: str
) -> PostId | CommentId:
    """Convert a raw ID string into the typed ID for the votable type."""
    try:
        item_id = UUID(votable_id)
    except ValueError:
        raise ValidationError(f"Invalid {votable_type.value.lower()} id: {votable_id}")

    if votable_type == VotableType.POST:
        return PostId(item_id)
    return CommentId(item_id)


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a post or comment.

    Casting the vote the user already holds removes it; casting the other
    type flips it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> VoteTallyResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Counters after the vote and the user's resulting vote

        Raises:
            NotFoundError: If the item does not exist
            ConflictError: If a concurrent vote collided
        """
        with logfire.span(
            "cast_vote.execute",
            votable_type=request.votable_type.value,
            votable_id=request.votable_id,
            vote_type=request.vote_type.value,
        ):
            tally = await self.vote_service.cast_vote(
                user_id=UserId(UUID(request.user_id)),
                votable_type=request.votable_type,
                votable_id=parse_votable_id(request.votable_type, request.votable_id),
                vote_type=request.vote_type,
            )
            return VoteTallyResponse.from_tally(tally)
