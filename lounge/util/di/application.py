"""Application layer DI providers."""

from dishka import Scope, provide

from lounge.application.usecase.search import SearchTagsUseCase, SearchUseCase
from lounge.application.usecase.vote import CastVoteUseCase, GetVoteStatusUseCase
from lounge.domain.service import SearchService, VoteService
from lounge.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_status_use_case(
        self, vote_service: VoteService
    ) -> GetVoteStatusUseCase:
        """Provide get vote status use case."""
        return GetVoteStatusUseCase(vote_service=vote_service)

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_search_use_case(self, search_service: SearchService) -> SearchUseCase:
        """Provide search use case."""
        return SearchUseCase(search_service=search_service)

    @provide(scope=Scope.REQUEST)
    def get_search_tags_use_case(
        self, search_service: SearchService
    ) -> SearchTagsUseCase:
        """Provide tag autocomplete use case."""
        return SearchTagsUseCase(search_service=search_service)
