"""Tag autocomplete use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from lounge.application.usecase.base import BaseUseCase
from lounge.domain.service import SearchService


class SearchTagsRequest(BaseModel):
    """Tag autocomplete request."""

    q: Optional[str] = None
    limit: int = Field(default=10, ge=1, le=20)


class SearchTagsResponse(BaseModel):
    """Tag autocomplete response."""

    tags: list[str]


class SearchTagsUseCase(BaseUseCase):
    """Use case for suggesting tags by prefix or popularity."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: SearchTagsRequest) -> SearchTagsResponse:
        with logfire.span("search_tags.execute", q=request.q, limit=request.limit):
            tags = await self.search_service.search_tags(
                prefix=request.q, limit=request.limit
            )
            return SearchTagsResponse(tags=tags)
