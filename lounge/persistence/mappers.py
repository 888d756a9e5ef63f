"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional, Sequence
from uuid import UUID

from lounge.domain.model import Comment, Lounge, PopularTag, Post, Vote
from lounge.domain.value import (
    CommentId,
    LoungeId,
    PostId,
    PostType,
    UserId,
    VotableType,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_lounge(row: Dict[str, Any]) -> Lounge:
    """Convert database row to Lounge domain model."""
    return Lounge(
        id=LoungeId(_uuid(row["id"])),
        name=row["name"],
        slug=row["slug"],
        description=row.get("description"),
        icon=row.get("icon"),
        member_count=row["member_count"],
        is_official=row["is_official"],
        is_active=row["is_active"],
        created_at=row["created_at"],
    )


def lounge_to_dict(lounge: Lounge) -> Dict[str, Any]:
    """Convert Lounge domain model to database dict."""
    return lounge.model_dump()


def row_to_post(row: Dict[str, Any], tags: Optional[Sequence[str]] = None) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tags: Tag values fetched from post_tags

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        lounge_id=LoungeId(_uuid(row["lounge_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_nickname=row["author_nickname"],
        type=PostType(row["type"]),
        title=row.get("title"),
        content=row["content"],
        tags=list(tags or []),
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a posts-table dict (tags live in post_tags)."""
    data = post.model_dump(exclude={"tags"})
    data["type"] = post.type.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        content=row["content"],
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["votable_type"] = vote.votable_type.value
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_popular_tag(row: Dict[str, Any]) -> PopularTag:
    """Convert database row to PopularTag domain model."""
    return PopularTag(
        tag=row["tag"],
        count=row["count"],
        lounge_id=LoungeId(_uuid(row["lounge_id"])) if row.get("lounge_id") else None,
        updated_at=row["updated_at"],
    )
