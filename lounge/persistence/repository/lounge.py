"""PostgreSQL implementation of Lounge repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import Select, desc, func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import Lounge
from lounge.domain.repository import LoungeRepository
from lounge.domain.value import LoungeId
from lounge.persistence.mappers import lounge_to_dict, row_to_lounge
from lounge.persistence.tables import lounges_table


class PostgresLoungeRepository(LoungeRepository):
    """PostgreSQL implementation of LoungeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_text_filter(self, stmt: Select, text: str) -> Select:
        return stmt.where(
            lounges_table.c.is_active.is_(True),
            or_(
                lounges_table.c.name.icontains(text, autoescape=True),
                lounges_table.c.description.icontains(text, autoescape=True),
            ),
        )

    async def find_by_id(self, lounge_id: LoungeId) -> Optional[Lounge]:
        """Find a lounge by ID."""
        stmt = select(lounges_table).where(lounges_table.c.id == lounge_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_lounge(row._asdict()) if row else None

    async def find_by_ids(self, lounge_ids: Sequence[LoungeId]) -> List[Lounge]:
        """Find multiple lounges in a single query."""
        if not lounge_ids:
            return []

        stmt = select(lounges_table).where(lounges_table.c.id.in_(lounge_ids))
        result = await self.session.execute(stmt)
        return [row_to_lounge(row._asdict()) for row in result.fetchall()]

    async def save(self, lounge: Lounge) -> Lounge:
        """Save a lounge (create or update)."""
        values = lounge_to_dict(lounge)
        stmt = pg_insert(lounges_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[lounges_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return lounge

    async def search(self, text: str, limit: int = 20, offset: int = 0) -> List[Lounge]:
        """Find active lounges by name or description, biggest first."""
        with logfire.span(
            "lounge_repository.search", text=text, limit=limit, offset=offset
        ):
            stmt = self._apply_text_filter(select(lounges_table), text)
            stmt = (
                stmt.order_by(desc(lounges_table.c.member_count))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_lounge(row._asdict()) for row in result.fetchall()]

    async def count_matching(self, text: str) -> int:
        """Count active lounges matching by name or description."""
        with logfire.span("lounge_repository.count_matching", text=text):
            stmt = self._apply_text_filter(
                select(func.count()).select_from(lounges_table), text
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0
