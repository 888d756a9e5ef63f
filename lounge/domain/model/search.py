"""Search query and result value objects."""

from typing import Generic, Optional, TypeVar

from pydantic import Field

from lounge.domain.model.lounge import Lounge
from lounge.domain.model.post import Post
from lounge.domain.value import SearchScope
from lounge.domain.value.common import ValueObject

T = TypeVar("T")

TAG_PREFIX = "#"


class SearchQuery(ValueObject):
    """A single search request."""

    text: str
    scope: SearchScope = SearchScope.ALL
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)

    @property
    def is_tag_search(self) -> bool:
        return self.text.strip().startswith(TAG_PREFIX)

    @property
    def term(self) -> str:
        """Search term with surrounding whitespace and any tag marker removed."""
        text = self.text.strip()
        if text.startswith(TAG_PREFIX):
            return text[len(TAG_PREFIX) :].strip()
        return text

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PostHit(ValueObject):
    """A matching post together with the lounge it belongs to."""

    post: Post
    lounge: Optional[Lounge] = None


class ResultPage(ValueObject, Generic[T]):
    """One page of results for a single type plus the overall match count."""

    items: list[T] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)


class SearchResultSet(ValueObject):
    """Combined lounge and post results."""

    lounges: ResultPage[Lounge] = Field(default_factory=ResultPage[Lounge])
    posts: ResultPage[PostHit] = Field(default_factory=ResultPage[PostHit])
