"""Lounge repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lounge.domain.model.lounge import Lounge
from lounge.domain.value import LoungeId


class LoungeRepository(ABC):
    """Repository for Lounge entity."""

    @abstractmethod
    async def find_by_id(self, lounge_id: LoungeId) -> Optional[Lounge]:
        """Find a lounge by ID.

        Args:
            lounge_id: The lounge's unique identifier

        Returns:
            The lounge if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, lounge_ids: Sequence[LoungeId]) -> List[Lounge]:
        """Find multiple lounges in a single query.

        Args:
            lounge_ids: Lounge IDs to fetch

        Returns:
            Found lounges (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def save(self, lounge: Lounge) -> Lounge:
        """Save a lounge (create or update).

        Args:
            lounge: The lounge to save

        Returns:
            The saved lounge
        """
        pass

    @abstractmethod
    async def search(self, text: str, limit: int = 20, offset: int = 0) -> List[Lounge]:
        """Find active lounges whose name or description contains ``text``.

        Matching is case-insensitive.

        Args:
            text: Substring to look for
            limit: Maximum number of lounges to return
            offset: Number of lounges to skip

        Returns:
            Matching lounges ordered by member_count descending
        """
        pass

    @abstractmethod
    async def count_matching(self, text: str) -> int:
        """Count active lounges matching the same filter as ``search``.

        Args:
            text: Substring to look for

        Returns:
            Total number of matching lounges
        """
        pass
