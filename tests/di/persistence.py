"""Mock persistence providers for testing."""

from dishka import Scope, provide

from lounge.domain.repository import (
    CommentRepository,
    LoungeRepository,
    PostRepository,
    TagRepository,
    TransactionManager,
    VoteRepository,
)
from lounge.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLoungeRepository,
    InMemoryPostRepository,
    InMemoryTagRepository,
    InMemoryTransactionManager,
    InMemoryVoteRepository,
)
from lounge.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Stores live for the lifetime of one container, so every test that
    builds its own container gets fresh repositories while requests made
    through the same app share them.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_in_memory_post_repository(self) -> InMemoryPostRepository:
        return InMemoryPostRepository()

    @provide
    def get_post_repository(self, repository: InMemoryPostRepository) -> PostRepository:
        """Provide in-memory post repository."""
        return repository

    @provide
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide
    def get_lounge_repository(self) -> LoungeRepository:
        """Provide in-memory lounge repository."""
        return InMemoryLoungeRepository()

    @provide
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide
    def get_tag_repository(self, posts: InMemoryPostRepository) -> TagRepository:
        """Provide in-memory tag repository backed by the post store."""
        return InMemoryTagRepository(posts)

    @provide
    def get_transaction_manager(self) -> TransactionManager:
        """Provide lock-based transaction manager."""
        return InMemoryTransactionManager()
