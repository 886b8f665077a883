"""Core interfaces for rating providers."""

from .filter_service import IFilterService
from .rating_client import IRatingClient, RatingResponse
from .rating_platform_service import IRatingPlatformService
from .search_service import ISearchService

__all__ = [
    "RatingResponse",
    "IRatingClient",
    "IFilterService",
    "ISearchService",
    "IRatingPlatformService",
]
