"""TMDb rating provider."""

from .client import TMDbClient
from .filter_service import TMDbFilterService
from .rating_platform_service import TMDbRatingPlatformService
from .search_service import TMDbSearchService

__all__ = [
    "TMDbClient",
    "TMDbFilterService",
    "TMDbSearchService",
    "TMDbRatingPlatformService",
]
