"""Search use cases."""

from .search import SearchRequest, SearchResponse, SearchUseCase
from .search_tags import SearchTagsRequest, SearchTagsResponse, SearchTagsUseCase

__all__ = [
    "SearchRequest",
    "SearchResponse",
    "SearchUseCase",
    "SearchTagsRequest",
    "SearchTagsResponse",
    "SearchTagsUseCase",
]
