"""Domain layer DI providers."""

from dishka import Scope, provide

from lounge.config import AuthSettings, SearchSettings
from lounge.domain.repository import (
    CommentRepository,
    LoungeRepository,
    PostRepository,
    TagRepository,
    TransactionManager,
    VoteRepository,
)
from lounge.domain.service import JWTService, SearchService, VoteService
from lounge.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        transaction_manager: TransactionManager,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_search_service(
        self,
        lounge_repository: LoungeRepository,
        post_repository: PostRepository,
        tag_repository: TagRepository,
        search_settings: SearchSettings,
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(
            lounge_repository=lounge_repository,
            post_repository=post_repository,
            tag_repository=tag_repository,
            search_settings=search_settings,
        )
