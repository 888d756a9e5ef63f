"""Repository interfaces for Fandom Lounge domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from lounge.domain.repository.comment import CommentRepository
from lounge.domain.repository.lounge import LoungeRepository
from lounge.domain.repository.post import PostRepository
from lounge.domain.repository.tag import TagRepository
from lounge.domain.repository.transaction import TransactionManager
from lounge.domain.repository.votable import VotableRepository
from lounge.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "LoungeRepository",
    "PostRepository",
    "TagRepository",
    "TransactionManager",
    "VotableRepository",
    "VoteRepository",
]
