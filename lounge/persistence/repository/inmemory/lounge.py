"""In-memory lounge repository for testing."""

from typing import Optional, Sequence

from lounge.domain.model.lounge import Lounge
from lounge.domain.repository.lounge import LoungeRepository
from lounge.domain.value import LoungeId


class InMemoryLoungeRepository(LoungeRepository):
    """In-memory implementation of LoungeRepository for testing."""

    def __init__(self) -> None:
        self._lounges: dict[LoungeId, Lounge] = {}

    def _matching(self, text: str) -> list[Lounge]:
        needle = text.lower()
        return [
            lounge
            for lounge in self._lounges.values()
            if lounge.is_active
            and (
                needle in lounge.name.lower()
                or needle in (lounge.description or "").lower()
            )
        ]

    async def find_by_id(self, lounge_id: LoungeId) -> Optional[Lounge]:
        """Find a lounge by ID."""
        return self._lounges.get(lounge_id)

    async def find_by_ids(self, lounge_ids: Sequence[LoungeId]) -> list[Lounge]:
        """Find multiple lounges by ID."""
        return [self._lounges[lid] for lid in lounge_ids if lid in self._lounges]

    async def save(self, lounge: Lounge) -> Lounge:
        """Save or update a lounge."""
        self._lounges[lounge.id] = lounge
        return lounge

    async def search(self, text: str, limit: int = 20, offset: int = 0) -> list[Lounge]:
        """Find matching active lounges, biggest first."""
        lounges = self._matching(text)
        lounges.sort(key=lambda lounge: lounge.member_count, reverse=True)
        return lounges[offset : offset + limit]

    async def count_matching(self, text: str) -> int:
        """Count matching active lounges."""
        return len(self._matching(text))
