"""In-memory implementation of Tag repository for testing."""

from collections import Counter
from typing import Optional

from lounge.domain.model.tag import PopularTag
from lounge.domain.repository.tag import TagRepository
from lounge.domain.value import LoungeId
from lounge.persistence.repository.inmemory.post import InMemoryPostRepository


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing.

    Post tags are read from the post repository so both stay consistent.
    """

    def __init__(self, post_repository: InMemoryPostRepository) -> None:
        """Initialize repository backed by the given post store."""
        self._post_repository = post_repository
        self._popular: dict[tuple[str, Optional[LoungeId]], PopularTag] = {}

    def _all_tags(self) -> list[str]:
        return [tag for post in self._post_repository.posts for tag in post.tags]

    async def find_by_prefix(self, prefix: str, limit: int = 10) -> list[str]:
        """Find distinct tags starting with a prefix."""
        wanted = prefix.lower()
        matches = [tag for tag in self._all_tags() if tag.lower().startswith(wanted)]
        return list(dict.fromkeys(matches))[:limit]

    async def find_popular(
        self, limit: int = 10, lounge_id: Optional[LoungeId] = None
    ) -> list[PopularTag]:
        """Read cache entries for a lounge scope, highest count first."""
        entries = [p for p in self._popular.values() if p.lounge_id == lounge_id]
        entries.sort(key=lambda p: p.count, reverse=True)
        return entries[:limit]

    async def aggregate_by_frequency(self, limit: int = 10) -> list[PopularTag]:
        """Count tag usage across stored posts."""
        counts = Counter(self._all_tags())
        return [PopularTag(tag=tag, count=count) for tag, count in counts.most_common(limit)]

    async def save_popular(self, popular_tag: PopularTag) -> PopularTag:
        """Create or replace a cache entry."""
        self._popular[(popular_tag.tag, popular_tag.lounge_id)] = popular_tag
        return popular_tag
