"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteTallyResponse
from .get_vote_status import GetVoteStatusRequest, GetVoteStatusUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "VoteTallyResponse",
    "GetVoteStatusRequest",
    "GetVoteStatusUseCase",
]
