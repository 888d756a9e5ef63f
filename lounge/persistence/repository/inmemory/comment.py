"""In-memory comment repository for testing."""

from typing import Optional

from lounge.domain.model.comment import Comment
from lounge.domain.repository.comment import CommentRepository
from lounge.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(
        self, item_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        return self._comments.get(item_id)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def adjust_vote_counts(
        self, item_id: CommentId, upvote_delta: int, downvote_delta: int
    ) -> tuple[int, int]:
        comment = self._comments[item_id]
        updated = comment.model_copy(
            update={
                "upvote_count": max(comment.upvote_count + upvote_delta, 0),
                "downvote_count": max(comment.downvote_count + downvote_delta, 0),
            }
        )
        self._comments[item_id] = updated
        return updated.upvote_count, updated.downvote_count
