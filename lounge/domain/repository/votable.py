"""Shared contract for repositories of votable content."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from lounge.domain.model import Comment, Post

IdT = TypeVar("IdT")
VotableT = TypeVar("VotableT", Post, Comment)


class VotableRepository(ABC, Generic[IdT, VotableT]):
    """Operations the vote service needs from post and comment storage."""

    @abstractmethod
    async def find_by_id(
        self, item_id: IdT, for_update: bool = False
    ) -> Optional[VotableT]:
        """Find an item by ID.

        Args:
            item_id: The item's unique identifier
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def adjust_vote_counts(
        self, item_id: IdT, upvote_delta: int, downvote_delta: int
    ) -> tuple[int, int]:
        """Atomically shift the vote counters of an item.

        Counters never drop below zero.

        Args:
            item_id: The item ID
            upvote_delta: Change applied to the upvote counter
            downvote_delta: Change applied to the downvote counter

        Returns:
            The (upvote_count, downvote_count) after the update
        """
        pass
