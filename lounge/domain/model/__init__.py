"""Domain model entities for Fandom Lounge."""

from lounge.domain.model.comment import Comment
from lounge.domain.model.lounge import Lounge
from lounge.domain.model.post import Post
from lounge.domain.model.search import (
    PostHit,
    ResultPage,
    SearchQuery,
    SearchResultSet,
)
from lounge.domain.model.tag import PopularTag
from lounge.domain.model.vote import (
    Vote,
    VoteAction,
    VoteTally,
    VoteTransition,
    resolve_vote_transition,
)

__all__ = [
    "Lounge",
    "Post",
    "Comment",
    "Vote",
    "VoteAction",
    "VoteTally",
    "VoteTransition",
    "resolve_vote_transition",
    "PopularTag",
    "SearchQuery",
    "SearchResultSet",
    "ResultPage",
    "PostHit",
]
