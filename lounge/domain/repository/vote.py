"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from lounge.domain.model.vote import Vote
from lounge.domain.value import CommentId, PostId, UserId, VotableType, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: Union[PostId, CommentId],
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (post or comment)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user/votable
        """
        pass

    @abstractmethod
    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Flip an existing vote to another type.

        Args:
            vote_id: The vote ID
            vote_type: The new vote type

        Returns:
            The updated vote
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote (toggle-off).

        Args:
            vote_id: The vote ID to delete
        """
        pass

    @abstractmethod
    async def count_by_votable(
        self,
        votable_type: VotableType,
        votable_id: Union[PostId, CommentId],
        vote_type: VoteType,
    ) -> int:
        """Count votes of one type on a specific item.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item
            vote_type: Vote type to count

        Returns:
            Number of matching votes
        """
        pass
