"""In-memory post repository for testing."""

from typing import Optional

from lounge.domain.model.post import Post
from lounge.domain.repository.post import PostRepository
from lounge.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _matching(self, text: Optional[str], tag: Optional[str]) -> list[Post]:
        posts = [p for p in self._posts.values() if p.deleted_at is None]

        if text:
            needle = text.lower()
            posts = [
                p
                for p in posts
                if needle in (p.title or "").lower() or needle in p.content.lower()
            ]

        if tag:
            wanted = tag.lower()
            posts = [p for p in posts if any(t.lower() == wanted for t in p.tags)]

        return posts

    @property
    def posts(self) -> list[Post]:
        """All stored posts, deleted ones included."""
        return list(self._posts.values())

    async def find_by_id(
        self, item_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(item_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def search(
        self,
        text: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find matching posts, newest first."""
        posts = self._matching(text, tag)
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count_matching(
        self,
        text: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> int:
        """Count posts matching the given filters."""
        return len(self._matching(text, tag))

    async def adjust_vote_counts(
        self, item_id: PostId, upvote_delta: int, downvote_delta: int
    ) -> tuple[int, int]:
        """Shift vote counters (minimum 0)."""
        post = self._posts[item_id]
        updated = post.model_copy(
            update={
                "upvote_count": max(post.upvote_count + upvote_delta, 0),
                "downvote_count": max(post.downvote_count + downvote_delta, 0),
            }
        )
        self._posts[item_id] = updated
        return updated.upvote_count, updated.downvote_count
