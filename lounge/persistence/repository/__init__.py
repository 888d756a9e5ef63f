"""PostgreSQL repository implementations."""

from lounge.persistence.repository.comment import PostgresCommentRepository
from lounge.persistence.repository.lounge import PostgresLoungeRepository
from lounge.persistence.repository.post import PostgresPostRepository
from lounge.persistence.repository.tag import PostgresTagRepository
from lounge.persistence.repository.transaction import PostgresTransactionManager
from lounge.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresLoungeRepository",
    "PostgresPostRepository",
    "PostgresTagRepository",
    "PostgresTransactionManager",
    "PostgresVoteRepository",
]
