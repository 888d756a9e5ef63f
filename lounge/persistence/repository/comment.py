"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import Comment
from lounge.domain.repository import CommentRepository
from lounge.domain.value import CommentId
from lounge.persistence.mappers import comment_to_dict, row_to_comment
from lounge.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, item_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID, optionally locking its row."""
        stmt = select(comments_table).where(comments_table.c.id == item_id)
        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        values = comment_to_dict(comment)
        stmt = pg_insert(comments_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def adjust_vote_counts(
        self, item_id: CommentId, upvote_delta: int, downvote_delta: int
    ) -> tuple[int, int]:
        """Atomically shift vote counters with a SQL-level update."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == item_id)
            .values(
                upvote_count=func.greatest(
                    comments_table.c.upvote_count + upvote_delta, 0
                ),
                downvote_count=func.greatest(
                    comments_table.c.downvote_count + downvote_delta, 0
                ),
            )
            .returning(comments_table.c.upvote_count, comments_table.c.downvote_count)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row.upvote_count, row.downvote_count
