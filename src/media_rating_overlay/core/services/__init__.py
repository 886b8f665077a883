"""Core service implementations."""

from .item_eligibility import ItemEligibilityService
from .rating_builder import RatingBuilderService
from .rating_service_factory import RatingServiceFactory
from .tmdb import TMDbClient, TMDbFilterService, TMDbRatingPlatformService, TMDbSearchService

__all__ = [
    "RatingServiceFactory",
    "RatingBuilderService",
    "ItemEligibilityService",
    "TMDbClient",
    "TMDbFilterService",
    "TMDbSearchService",
    "TMDbRatingPlatformService",
]
