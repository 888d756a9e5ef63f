"""Domain value objects for Fandom Lounge.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum


class VoteType(str, Enum):
    """Type of vote."""

    UPVOTE = "UPVOTE"
    DOWNVOTE = "DOWNVOTE"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "POST"
    COMMENT = "COMMENT"


class PostType(str, Enum):
    """Kind of post content."""

    TEXT = "TEXT"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    CLIP = "CLIP"
    FANART = "FANART"


class SearchScope(str, Enum):
    """Which result types a search covers."""

    ALL = "all"
    LOUNGE = "lounge"
    POST = "post"

    @property
    def includes_lounges(self) -> bool:
        return self in (SearchScope.ALL, SearchScope.LOUNGE)

    @property
    def includes_posts(self) -> bool:
        return self in (SearchScope.ALL, SearchScope.POST)
