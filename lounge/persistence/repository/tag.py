"""PostgreSQL implementation of Tag repository."""

from typing import Optional

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import PopularTag
from lounge.domain.repository import TagRepository
from lounge.domain.value import LoungeId
from lounge.persistence.mappers import row_to_popular_tag
from lounge.persistence.tables import popular_tags_table, post_tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _lounge_filter(self, lounge_id: Optional[LoungeId]):
        if lounge_id is None:
            return popular_tags_table.c.lounge_id.is_(None)
        return popular_tags_table.c.lounge_id == lounge_id

    async def find_by_prefix(self, prefix: str, limit: int = 10) -> list[str]:
        """Find distinct post tags starting with a prefix."""
        with logfire.span("tag_repository.find_by_prefix", prefix=prefix, limit=limit):
            stmt = (
                select(post_tags_table.c.tag)
                .where(post_tags_table.c.tag.istartswith(prefix, autoescape=True))
                .distinct()
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row.tag for row in result.fetchall()]

    async def find_popular(
        self, limit: int = 10, lounge_id: Optional[LoungeId] = None
    ) -> list[PopularTag]:
        """Read the popular-tag cache, highest count first."""
        stmt = (
            select(popular_tags_table)
            .where(self._lounge_filter(lounge_id))
            .order_by(desc(popular_tags_table.c.count))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_popular_tag(row._asdict()) for row in result.fetchall()]

    async def aggregate_by_frequency(self, limit: int = 10) -> list[PopularTag]:
        """Group post tags by value and rank them by usage."""
        with logfire.span("tag_repository.aggregate_by_frequency", limit=limit):
            usage = func.count(post_tags_table.c.tag).label("usage")
            stmt = (
                select(post_tags_table.c.tag, usage)
                .group_by(post_tags_table.c.tag)
                .order_by(desc(usage))
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [
                PopularTag(tag=row.tag, count=row.usage) for row in result.fetchall()
            ]

    async def save_popular(self, popular_tag: PopularTag) -> PopularTag:
        """Create or update a cache entry keyed by (tag, lounge)."""
        values = {
            "count": popular_tag.count,
            "updated_at": popular_tag.updated_at,
        }
        stmt = (
            update(popular_tags_table)
            .where(
                popular_tags_table.c.tag == popular_tag.tag,
                self._lounge_filter(popular_tag.lounge_id),
            )
            .values(**values)
        )
        result = await self.session.execute(stmt)

        if result.rowcount == 0:  # type: ignore[attr-defined]
            await self.session.execute(
                insert(popular_tags_table).values(
                    tag=popular_tag.tag, lounge_id=popular_tag.lounge_id, **values
                )
            )

        await self.session.flush()
        return popular_tag
