"""Rating builder service."""

from typing import List, Sequence

from ...infrastructure.logging import LoggerMixin
from ..models import Item, Rating, RatingService


class RatingBuilderService(LoggerMixin):
    """Collects ratings for an item from every available provider."""

    def __init__(self, rating_services: Sequence[RatingService]) -> None:
        self._rating_services = list(rating_services)

    async def build_ratings(self, item: Item) -> Item:
        """Request missing ratings for an item.

        Providers whose label already appears in ``item.ratings`` and providers
        without a platform service are skipped. Provider errors propagate.

        Args:
            item: Item to rate.

        Returns:
            Copy of the item with the new ratings appended.
        """
        self.logger.debug(f"Building ratings for item {item.id}")

        ratings: List[Rating] = list(item.ratings)
        for rating_service in self._rating_services:
            if item.has_rating_from(rating_service.name):
                self.logger.debug(
                    f"Rating already exists for item {item.id} from {rating_service.name}"
                )
                continue

            if rating_service.platform_service is None:
                continue

            self.logger.debug(f"Getting rating for item {item.id} from {rating_service.name}")
            rating = await rating_service.platform_service.get_rating(item)
            ratings.append(rating)

        return item.model_copy(update={"ratings": tuple(ratings)})
