"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lounge.domain.model.tag import PopularTag
from lounge.domain.value import LoungeId


class TagRepository(ABC):
    """Repository interface for post tags and the popular-tag cache."""

    @abstractmethod
    async def find_by_prefix(self, prefix: str, limit: int = 10) -> list[str]:
        """Find distinct post tags starting with ``prefix`` (case-insensitive).

        Args:
            prefix: Tag prefix
            limit: Maximum number of tags to return

        Returns:
            Distinct tag values in store order
        """
        pass

    @abstractmethod
    async def find_popular(
        self, limit: int = 10, lounge_id: Optional[LoungeId] = None
    ) -> list[PopularTag]:
        """Read the precomputed popularity cache.

        Args:
            limit: Maximum number of entries to return
            lounge_id: Lounge scope (None for the global ranking)

        Returns:
            Cached entries ordered by count descending
        """
        pass

    @abstractmethod
    async def aggregate_by_frequency(self, limit: int = 10) -> list[PopularTag]:
        """Count tag usage across all posts on the fly.

        Args:
            limit: Maximum number of tags to return

        Returns:
            Tags ordered by usage count descending
        """
        pass

    @abstractmethod
    async def save_popular(self, popular_tag: PopularTag) -> PopularTag:
        """Create or update a popularity cache entry.

        Args:
            popular_tag: Cache entry to store

        Returns:
            The stored entry
        """
        pass
