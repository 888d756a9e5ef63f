"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from lounge.domain.model import Comment, Lounge, Post
from lounge.domain.value import CommentId, LoungeId, PostId, UserId

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_lounge(
    name: str = "K-Pop Lounge",
    slug: Optional[str] = None,
    description: Optional[str] = None,
    member_count: int = 0,
    is_active: bool = True,
) -> Lounge:
    """Helper function to build a lounge with sensible defaults."""
    return Lounge(
        id=LoungeId(uuid4()),
        name=name,
        slug=slug or f"lounge-{uuid4().hex[:8]}",
        description=description,
        member_count=member_count,
        is_active=is_active,
    )


def make_post(
    lounge_id: Optional[LoungeId] = None,
    title: Optional[str] = "A post",
    content: str = "Post body",
    tags: Optional[list[str]] = None,
    upvote_count: int = 0,
    downvote_count: int = 0,
    minutes_ago: int = 0,
    deleted: bool = False,
) -> Post:
    """Helper function to build a post.

    ``minutes_ago`` offsets created_at from a fixed base time so ordering
    is deterministic.
    """
    created_at = BASE_TIME - timedelta(minutes=minutes_ago)
    return Post(
        id=PostId(uuid4()),
        lounge_id=lounge_id or LoungeId(uuid4()),
        author_id=UserId(uuid4()),
        author_nickname="fan",
        title=title,
        content=content,
        tags=tags or [],
        upvote_count=upvote_count,
        downvote_count=downvote_count,
        created_at=created_at,
        updated_at=created_at,
        deleted_at=BASE_TIME if deleted else None,
    )


def make_comment(
    post_id: Optional[PostId] = None,
    upvote_count: int = 0,
    downvote_count: int = 0,
    deleted: bool = False,
) -> Comment:
    """Helper function to build a comment."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id or PostId(uuid4()),
        author_id=UserId(uuid4()),
        content="Nice one",
        upvote_count=upvote_count,
        downvote_count=downvote_count,
        deleted_at=BASE_TIME if deleted else None,
    )
