"""Get vote status use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from lounge.application.usecase.base import BaseUseCase
from lounge.application.usecase.vote.cast_vote import VoteTallyResponse, parse_votable_id
from lounge.domain.service import VoteService
from lounge.domain.value import UserId, VotableType


class GetVoteStatusRequest(BaseModel):
    """Get vote status request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: Optional[str] = None  # None for anonymous callers


class GetVoteStatusUseCase(BaseUseCase):
    """Use case for reading an item's counters and the caller's vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStatusRequest) -> VoteTallyResponse:
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        tally = await self.vote_service.get_vote_status(
            votable_type=request.votable_type,
            votable_id=parse_votable_id(request.votable_type, request.votable_id),
            user_id=user_id,
        )
        return VoteTallyResponse.from_tally(tally)
