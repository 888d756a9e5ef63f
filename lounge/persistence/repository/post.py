"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, delete, desc, exists, func, insert, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import Post
from lounge.domain.repository import PostRepository
from lounge.domain.value import PostId
from lounge.persistence.mappers import post_to_dict, row_to_post
from lounge.persistence.tables import post_tags_table, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tags
        """
        if not post_ids:
            return {}

        stmt = select(post_tags_table.c.post_id, post_tags_table.c.tag).where(
            post_tags_table.c.post_id.in_(post_ids)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.tag)

        return post_tag_map

    def _apply_filters(
        self, stmt: Select, text: Optional[str], tag: Optional[str]
    ) -> Select:
        stmt = stmt.where(posts_table.c.deleted_at.is_(None))

        if text:
            stmt = stmt.where(
                or_(
                    posts_table.c.title.icontains(text, autoescape=True),
                    posts_table.c.content.icontains(text, autoescape=True),
                )
            )

        if tag:
            stmt = stmt.where(
                exists().where(
                    post_tags_table.c.post_id == posts_table.c.id,
                    func.lower(post_tags_table.c.tag) == tag.lower(),
                )
            )

        return stmt

    async def find_by_id(
        self, item_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID, optionally locking its row."""
        with logfire.span("post_repository.find_by_id", post_id=str(item_id)):
            stmt = select(posts_table).where(posts_table.c.id == item_id)
            if for_update:
                stmt = stmt.with_for_update()

            result = await self.session.execute(stmt)
            row = result.fetchone()
            if not row:
                return None

            post_tag_map = await self._fetch_tags_for_posts([row.id])
            return row_to_post(row._asdict(), tags=post_tag_map.get(row.id, []))

    async def save(self, post: Post) -> Post:
        """Save a post (create or update), replacing its tags."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            values = post_to_dict(post)
            stmt = pg_insert(posts_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            await self.session.execute(stmt)

            await self.session.execute(
                delete(post_tags_table).where(post_tags_table.c.post_id == post.id)
            )
            if post.tags:
                await self.session.execute(
                    insert(post_tags_table),
                    [{"post_id": post.id, "tag": tag} for tag in dict.fromkeys(post.tags)],
                )

            await self.session.flush()
            return post

    async def search(
        self,
        text: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find non-deleted posts, newest first."""
        with logfire.span(
            "post_repository.search", text=text, tag=tag, limit=limit, offset=offset
        ):
            stmt = self._apply_filters(select(posts_table), text, tag)
            stmt = (
                stmt.order_by(desc(posts_table.c.created_at)).limit(limit).offset(offset)
            )

            result = await self.session.execute(stmt)
            post_rows = result.fetchall()
            if not post_rows:
                return []

            post_tag_map = await self._fetch_tags_for_posts([row.id for row in post_rows])
            return [
                row_to_post(row._asdict(), tags=post_tag_map.get(row.id, []))
                for row in post_rows
            ]

    async def count_matching(
        self,
        text: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> int:
        """Count non-deleted posts matching the given filters."""
        with logfire.span("post_repository.count_matching", text=text, tag=tag):
            stmt = self._apply_filters(
                select(func.count()).select_from(posts_table), text, tag
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def adjust_vote_counts(
        self, item_id: PostId, upvote_delta: int, downvote_delta: int
    ) -> tuple[int, int]:
        """Atomically shift vote counters with a SQL-level update."""
        with logfire.span(
            "post_repository.adjust_vote_counts",
            post_id=str(item_id),
            upvote_delta=upvote_delta,
            downvote_delta=downvote_delta,
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == item_id)
                .values(
                    upvote_count=func.greatest(
                        posts_table.c.upvote_count + upvote_delta, 0
                    ),
                    downvote_count=func.greatest(
                        posts_table.c.downvote_count + downvote_delta, 0
                    ),
                )
                .returning(posts_table.c.upvote_count, posts_table.c.downvote_count)
            )
            result = await self.session.execute(stmt)
            row = result.one()
            await self.session.flush()
            return row.upvote_count, row.downvote_count
