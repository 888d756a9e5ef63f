"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .search_service import SearchService
from .vote_service import VoteService

__all__ = [
    "JWTService",
    "SearchService",
    "Service",
    "VoteService",
]
