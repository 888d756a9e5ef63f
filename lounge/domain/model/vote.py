"""Vote entity and vote state transitions.

A user holds at most one vote per post or comment. Casting the same vote
again removes it (toggle-off); casting the opposite vote flips it.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import UserId, VotableType, VoteId, VoteType
from lounge.domain.value.common import ValueObject


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Polymorphic reference to votable (post or comment)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # PostId or CommentId (both are UUIDs)
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)


class VoteAction(str, Enum):
    """Store mutation required by a vote transition."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class VoteTransition(ValueObject):
    """Outcome of applying a requested vote to the current one."""

    action: VoteAction
    resulting_vote: Optional[VoteType]
    upvote_delta: int
    downvote_delta: int


def _delta(vote_type: VoteType, amount: int) -> tuple[int, int]:
    if vote_type == VoteType.UPVOTE:
        return amount, 0
    return 0, amount


def resolve_vote_transition(
    current: Optional[VoteType], requested: VoteType
) -> VoteTransition:
    """Resolve a requested vote against the user's current vote.

    | current  | requested | action | resulting |
    |----------|-----------|--------|-----------|
    | None     | X         | create | X         |
    | X        | X         | delete | None      |
    | X        | not X     | update | not X     |

    Args:
        current: The user's existing vote type, if any
        requested: The vote type being cast

    Returns:
        The required store action and counter deltas
    """
    if current is None:
        up, down = _delta(requested, 1)
        return VoteTransition(
            action=VoteAction.CREATE,
            resulting_vote=requested,
            upvote_delta=up,
            downvote_delta=down,
        )

    if current == requested:
        up, down = _delta(requested, -1)
        return VoteTransition(
            action=VoteAction.DELETE,
            resulting_vote=None,
            upvote_delta=up,
            downvote_delta=down,
        )

    added_up, added_down = _delta(requested, 1)
    removed_up, removed_down = _delta(current, -1)
    return VoteTransition(
        action=VoteAction.UPDATE,
        resulting_vote=requested,
        upvote_delta=added_up + removed_up,
        downvote_delta=added_down + removed_down,
    )


class VoteTally(ValueObject):
    """Authoritative vote counts of a target plus the caller's vote."""

    upvote_count: int = Field(ge=0)
    downvote_count: int = Field(ge=0)
    user_vote: Optional[VoteType] = None

    def apply(self, transition: VoteTransition) -> "VoteTally":
        """Return the tally with a transition's deltas applied (floored at zero)."""
        return VoteTally(
            upvote_count=max(self.upvote_count + transition.upvote_delta, 0),
            downvote_count=max(self.downvote_count + transition.downvote_delta, 0),
            user_vote=transition.resulting_vote,
        )
