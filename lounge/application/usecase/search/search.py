"""Search use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from lounge.application.usecase.base import BaseUseCase, CamelModel
from lounge.domain.model import Lounge, PostHit, SearchQuery
from lounge.domain.service import SearchService
from lounge.domain.value import PostType, SearchScope


class SearchRequest(BaseModel):
    """Search request."""

    q: str
    type: SearchScope = SearchScope.ALL
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=50)


class LoungeItem(CamelModel):
    """Lounge item in search results."""

    id: str
    name: str
    slug: str
    description: Optional[str]
    icon: Optional[str]
    member_count: int
    is_official: bool

    @classmethod
    def from_lounge(cls, lounge: Lounge) -> "LoungeItem":
        return cls(
            id=str(lounge.id),
            name=lounge.name,
            slug=lounge.slug,
            description=lounge.description,
            icon=lounge.icon,
            member_count=lounge.member_count,
            is_official=lounge.is_official,
        )


class AuthorItem(CamelModel):
    nickname: str


class LoungeRef(CamelModel):
    name: str
    slug: str


class PostItem(CamelModel):
    """Post item in search results."""

    id: str
    type: PostType
    title: Optional[str]
    content: str
    tags: list[str]
    author: AuthorItem
    lounge: Optional[LoungeRef]
    upvote_count: int
    downvote_count: int
    comment_count: int
    created_at: datetime

    @classmethod
    def from_hit(cls, hit: PostHit) -> "PostItem":
        post = hit.post
        lounge_ref = (
            LoungeRef(name=hit.lounge.name, slug=hit.lounge.slug) if hit.lounge else None
        )
        return cls(
            id=str(post.id),
            type=post.type,
            title=post.title,
            content=post.content,
            tags=post.tags,
            author=AuthorItem(nickname=post.author_nickname),
            lounge=lounge_ref,
            upvote_count=post.upvote_count,
            downvote_count=post.downvote_count,
            comment_count=post.comment_count,
            created_at=post.created_at,
        )


class LoungeResults(CamelModel):
    items: list[LoungeItem]
    total: int


class PostResults(CamelModel):
    items: list[PostItem]
    total: int


class SearchResults(CamelModel):
    lounges: LoungeResults
    posts: PostResults


class SearchResponse(CamelModel):
    """Search response."""

    query: str
    type: SearchScope
    results: SearchResults


class SearchUseCase(BaseUseCase):
    """Use case for searching lounges and posts."""

    def __init__(self, search_service: SearchService) -> None:
        """Initialize search use case.

        Args:
            search_service: Search domain service
        """
        self.search_service = search_service

    async def execute(self, request: SearchRequest) -> SearchResponse:
        """Execute search flow.

        Args:
            request: Search request

        Returns:
            Matching lounges and posts with their totals

        Raises:
            ValidationError: If the query is blank or a bare tag marker
        """
        with logfire.span(
            "search.execute",
            q=request.q,
            type=request.type.value,
            page=request.page,
            limit=request.limit,
        ):
            result = await self.search_service.search(
                SearchQuery(
                    text=request.q,
                    scope=request.type,
                    page=request.page,
                    limit=request.limit,
                )
            )

            return SearchResponse(
                query=request.q,
                type=request.type,
                results=SearchResults(
                    lounges=LoungeResults(
                        items=[
                            LoungeItem.from_lounge(lounge)
                            for lounge in result.lounges.items
                        ],
                        total=result.lounges.total,
                    ),
                    posts=PostResults(
                        items=[PostItem.from_hit(hit) for hit in result.posts.items],
                        total=result.posts.total,
                    ),
                ),
            )
