"""In-memory vote repository for testing."""

from typing import Optional, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from lounge.domain.model.vote import Vote
from lounge.domain.repository.vote import VoteRepository
from lounge.domain.value import CommentId, PostId, UserId, VotableType, VoteId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: Union[PostId, CommentId],
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        votable_uuid = UUID(str(votable_id))
        for vote in self._votes.values():
            if (
                vote.user_id == user_id
                and vote.votable_type == votable_type
                and vote.votable_id == votable_uuid
            ):
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_votable(
            vote.user_id, vote.votable_type, vote.votable_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes[vote.id] = vote
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Flip a stored vote to another type."""
        updated = self._votes[vote_id].model_copy(update={"vote_type": vote_type})
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self._votes.pop(vote_id, None)

    async def count_by_votable(
        self,
        votable_type: VotableType,
        votable_id: Union[PostId, CommentId],
        vote_type: VoteType,
    ) -> int:
        """Count votes of one type for a votable item."""
        votable_uuid = UUID(str(votable_id))
        return sum(
            1
            for v in self._votes.values()
            if v.votable_type == votable_type
            and v.votable_id == votable_uuid
            and v.vote_type == vote_type
        )
