"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .lounge import InMemoryLoungeRepository
from .post import InMemoryPostRepository
from .tag import InMemoryTagRepository
from .transaction import InMemoryTransactionManager
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLoungeRepository",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
    "InMemoryTransactionManager",
    "InMemoryVoteRepository",
]
