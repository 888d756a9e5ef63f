"""Vote domain service."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from lounge.domain.error import ConflictError, NotFoundError
from lounge.domain.model import Vote, VoteAction, VoteTally, resolve_vote_transition
from lounge.domain.repository import (
    CommentRepository,
    PostRepository,
    TransactionManager,
    VotableRepository,
    VoteRepository,
)
from lounge.domain.value import CommentId, PostId, UserId, VotableType, VoteId, VoteType

from .base import Service

VotableId = Union[PostId, CommentId]


class VoteService(Service):
    """Domain service for vote operations.

    Keeps one vote per user per item and the denormalized upvote/downvote
    counters of posts and comments in step with the vote rows.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_repository: Post repository
            comment_repository: Comment repository
            transaction_manager: Unit-of-work boundary for vote writes
        """
        self.vote_repository = vote_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.transaction_manager = transaction_manager

    def _repository_for(self, votable_type: VotableType) -> VotableRepository:
        if votable_type == VotableType.POST:
            return self.post_repository
        return self.comment_repository

    async def cast_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: VotableId,
        vote_type: VoteType,
    ) -> VoteTally:
        """Apply a user's vote to a post or comment.

        Creates, flips or removes the user's vote and shifts the target's
        counters, all inside one transaction. Repeating the current vote
        removes it.

        Args:
            user_id: Voting user
            votable_type: Type of item (post or comment)
            votable_id: ID of the item
            vote_type: Requested vote

        Returns:
            Counters after the write and the user's resulting vote

        Raises:
            NotFoundError: If the item does not exist or is deleted
            ConflictError: If a concurrent vote by the same user collided
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            vote_type=vote_type.value,
        ):
            repository = self._repository_for(votable_type)

            try:
                async with self.transaction_manager.transaction():
                    # Row lock serializes concurrent votes on the same item
                    target = await repository.find_by_id(votable_id, for_update=True)
                    if target is None or target.is_deleted:
                        logfire.warn(
                            "Vote on missing item",
                            votable_type=votable_type.value,
                            votable_id=str(votable_id),
                        )
                        raise NotFoundError(votable_type.value.title(), str(votable_id))

                    existing = await self.vote_repository.find_by_user_and_votable(
                        user_id, votable_type, votable_id
                    )
                    transition = resolve_vote_transition(
                        existing.vote_type if existing else None, vote_type
                    )

                    if existing is None:
                        await self.vote_repository.save(
                            Vote(
                                id=VoteId(uuid4()),
                                user_id=user_id,
                                votable_type=votable_type,
                                votable_id=UUID(str(votable_id)),
                                vote_type=vote_type,
                                created_at=datetime.now(),
                            )
                        )
                    elif transition.action == VoteAction.UPDATE:
                        await self.vote_repository.update_type(existing.id, vote_type)
                    else:
                        await self.vote_repository.delete(existing.id)

                    upvote_count, downvote_count = await repository.adjust_vote_counts(
                        votable_id,
                        transition.upvote_delta,
                        transition.downvote_delta,
                    )
            except IntegrityError:
                logfire.warn(
                    "Concurrent vote conflict",
                    user_id=str(user_id),
                    votable_id=str(votable_id),
                )
                raise ConflictError("Vote changed concurrently, please try again")

            logfire.info(
                "Vote applied",
                action=transition.action.value,
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                upvote_count=upvote_count,
                downvote_count=downvote_count,
            )

            return VoteTally(
                upvote_count=upvote_count,
                downvote_count=downvote_count,
                user_vote=transition.resulting_vote,
            )

    async def get_vote_status(
        self,
        votable_type: VotableType,
        votable_id: VotableId,
        user_id: UserId | None = None,
    ) -> VoteTally:
        """Read an item's counters and, for a known caller, their vote.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item
            user_id: Caller, or None when anonymous

        Returns:
            Current counters and the caller's vote (None when anonymous)

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "vote_service.get_vote_status",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        ):
            target = await self._repository_for(votable_type).find_by_id(votable_id)
            # Soft-deleted items still report their counters
            if target is None:
                raise NotFoundError(votable_type.value.title(), str(votable_id))

            user_vote = None
            if user_id is not None:
                vote = await self.vote_repository.find_by_user_and_votable(
                    user_id, votable_type, votable_id
                )
                user_vote = vote.vote_type if vote else None

            return VoteTally(
                upvote_count=target.upvote_count,
                downvote_count=target.downvote_count,
                user_vote=user_vote,
            )
