"""Search domain service."""

import logfire

from lounge.config import SearchSettings
from lounge.domain.error import ValidationError
from lounge.domain.model import (
    Lounge,
    PostHit,
    ResultPage,
    SearchQuery,
    SearchResultSet,
)
from lounge.domain.repository import LoungeRepository, PostRepository, TagRepository
from lounge.domain.value import SearchScope

from .base import Service


class SearchService(Service):
    """Domain service resolving search queries into lounge and post matches.

    Queries starting with ``#`` search post tags only; anything else is a
    case-insensitive substring search over lounges and posts.
    """

    def __init__(
        self,
        lounge_repository: LoungeRepository,
        post_repository: PostRepository,
        tag_repository: TagRepository,
        search_settings: SearchSettings,
    ) -> None:
        """Initialize search service.

        Args:
            lounge_repository: Lounge repository
            post_repository: Post repository
            tag_repository: Tag repository
            search_settings: Preview sizes and pagination bounds
        """
        self.lounge_repository = lounge_repository
        self.post_repository = post_repository
        self.tag_repository = tag_repository
        self.settings = search_settings

    def _window(self, query: SearchQuery, preview_size: int) -> tuple[int, int]:
        """Return (limit, offset) for one result type."""
        if query.scope == SearchScope.ALL:
            return preview_size, 0
        return query.limit, query.offset

    async def search(self, query: SearchQuery) -> SearchResultSet:
        """Search lounges and posts.

        Args:
            query: Search text, scope and pagination

        Returns:
            One page of lounges and posts with their total match counts

        Raises:
            ValidationError: If the query is blank, a bare ``#``, or the
                limit exceeds the configured maximum
        """
        with logfire.span(
            "search_service.search",
            text=query.text,
            scope=query.scope.value,
            page=query.page,
            limit=query.limit,
        ):
            if not query.text.strip():
                raise ValidationError("Search query must not be empty")
            if query.limit > self.settings.max_limit:
                raise ValidationError(
                    f"Limit must not exceed {self.settings.max_limit}"
                )

            term = query.term
            if query.is_tag_search and not term:
                raise ValidationError("Tag search requires a tag name after '#'")

            lounges = ResultPage[Lounge]()
            posts = ResultPage[PostHit]()

            # Tag searches never match lounges, whatever the scope
            if query.scope.includes_lounges and not query.is_tag_search:
                lounges = await self._search_lounges(term, query)

            if query.scope.includes_posts:
                posts = await self._search_posts(term, query)

            logfire.info(
                "Search completed",
                tag_search=query.is_tag_search,
                lounge_total=lounges.total,
                post_total=posts.total,
            )
            return SearchResultSet(lounges=lounges, posts=posts)

    async def _search_lounges(self, term: str, query: SearchQuery) -> ResultPage[Lounge]:
        limit, offset = self._window(query, self.settings.lounge_preview_size)
        items = await self.lounge_repository.search(term, limit=limit, offset=offset)
        total = await self.lounge_repository.count_matching(term)
        return ResultPage[Lounge](items=items, total=total)

    async def _search_posts(self, term: str, query: SearchQuery) -> ResultPage[PostHit]:
        limit, offset = self._window(query, self.settings.post_preview_size)
        if query.is_tag_search:
            filters = {"tag": term}
        else:
            filters = {"text": term}

        posts = await self.post_repository.search(**filters, limit=limit, offset=offset)
        total = await self.post_repository.count_matching(**filters)

        # Batch fetch lounges for display (avoid N+1)
        lounge_ids = list(dict.fromkeys(post.lounge_id for post in posts))
        lounges = await self.lounge_repository.find_by_ids(lounge_ids)
        lounge_map = {lounge.id: lounge for lounge in lounges}

        hits = [PostHit(post=post, lounge=lounge_map.get(post.lounge_id)) for post in posts]
        return ResultPage[PostHit](items=hits, total=total)

    async def search_tags(self, prefix: str | None = None, limit: int = 10) -> list[str]:
        """Suggest tags.

        With a prefix, returns distinct tags starting with it. Without one,
        returns the most popular tags, read from the popularity cache or,
        when the cache is empty, counted from post tags.

        Args:
            prefix: Optional case-insensitive tag prefix
            limit: Maximum number of tags to return

        Returns:
            Tag values

        Raises:
            ValidationError: If the limit is out of range
        """
        with logfire.span("search_service.search_tags", prefix=prefix, limit=limit):
            if limit < 1 or limit > self.settings.max_tag_limit:
                raise ValidationError(
                    f"Limit must be between 1 and {self.settings.max_tag_limit}"
                )

            prefix = (prefix or "").strip()
            if prefix:
                tags = await self.tag_repository.find_by_prefix(prefix, limit=limit)
                logfire.info("Tags matched by prefix", prefix=prefix, count=len(tags))
                return tags

            popular = await self.tag_repository.find_popular(limit=limit)
            if not popular:
                logfire.info("Popular tag cache empty, aggregating from posts")
                popular = await self.tag_repository.aggregate_by_frequency(limit=limit)

            return [entry.tag for entry in popular]
