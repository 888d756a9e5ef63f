"""Optimistic vote state for interactive clients.

The predicted tally is shown immediately; the server answer replaces it, or
the prediction is discarded if the request fails.
"""

from typing import Optional

from lounge.adapter.client import LoungeClient
from lounge.domain.error import ConflictError
from lounge.domain.model import VoteTally, VoteTransition, resolve_vote_transition
from lounge.domain.value import VotableType, VoteType


class OptimisticVote:
    """Vote state of one post or comment as seen by a client."""

    def __init__(
        self, votable_type: VotableType, votable_id: str, confirmed: VoteTally
    ) -> None:
        self.votable_type = votable_type
        self.votable_id = votable_id
        self.confirmed = confirmed
        self.pending: Optional[VoteTransition] = None

    @property
    def current(self) -> VoteTally:
        """Tally to display: the confirmed one with any pending vote overlaid."""
        if self.pending is None:
            return self.confirmed
        return self.confirmed.apply(self.pending)

    @property
    def in_flight(self) -> bool:
        return self.pending is not None

    def apply(self, requested: VoteType) -> VoteTally:
        """Predict the outcome of a vote locally.

        Raises:
            ConflictError: If another vote is still waiting for the server
        """
        if self.pending is not None:
            raise ConflictError("A vote is already in flight")
        self.pending = resolve_vote_transition(self.confirmed.user_vote, requested)
        return self.current

    def confirm(self, tally: VoteTally) -> VoteTally:
        """Adopt the server's tally."""
        self.confirmed = tally
        self.pending = None
        return tally

    def rollback(self) -> VoteTally:
        """Discard the prediction."""
        self.pending = None
        return self.confirmed

    async def vote(self, client: LoungeClient, requested: VoteType) -> VoteTally:
        """Apply a vote optimistically and reconcile with the server.

        The prediction is discarded on any failure, cancellation included.

        Raises:
            DomainError: The server rejected the vote
            AdapterError: The server could not be reached or answered garbage
        """
        self.apply(requested)
        try:
            tally = await client.cast_vote(self.votable_type, self.votable_id, requested)
        except BaseException:
            self.rollback()
            raise
        return self.confirm(tally)
