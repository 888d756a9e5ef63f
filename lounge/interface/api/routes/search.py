"""Search routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from lounge.application.usecase.search import (
    SearchRequest,
    SearchResponse,
    SearchTagsRequest,
    SearchTagsUseCase,
    SearchUseCase,
)
from lounge.domain.value import SearchScope

router = APIRouter(
    prefix="/search",
    tags=["search"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=SearchResponse,
    summary="Search lounges and posts",
    description="Substring search over lounges and posts, or a tag search when the query starts with '#'.",
)
async def search(
    use_case: FromDishka[SearchUseCase],
    q: str = Query(...),
    type: SearchScope = Query(default=SearchScope.ALL),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=50),
) -> SearchResponse:
    """Search lounges and posts.

    Args:
        use_case: Search use case (injected)
        q: Search text; a leading '#' searches post tags
        type: Result types to include ('all', 'lounge' or 'post')
        page: Page number for single-type searches
        limit: Page size for single-type searches (1-50)

    Returns:
        Matching lounges and posts with totals

    Example:
        GET /search?q=%23kpop&type=post&page=2
    """
    with logfire.span("api.search", q=q, type=type.value, page=page, limit=limit):
        request = SearchRequest(q=q, type=type, page=page, limit=limit)
        return await use_case.execute(request)


@router.get(
    "/tags",
    response_model=list[str],
    summary="Autocomplete tags",
    description="Tags starting with the given prefix, or the most popular tags when no prefix is given.",
)
async def search_tags(
    use_case: FromDishka[SearchTagsUseCase],
    q: Optional[str] = Query(default=None),
    limit: int = Query(default=10, ge=1, le=20),
) -> list[str]:
    """Suggest tags.

    Example:
        GET /search/tags?q=kp&limit=5
    """
    with logfire.span("api.search_tags", q=q, limit=limit):
        response = await use_case.execute(SearchTagsRequest(q=q, limit=limit))
        return response.tags
