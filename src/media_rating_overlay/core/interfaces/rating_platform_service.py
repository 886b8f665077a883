"""Rating platform service interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import Item, Rating


class IRatingPlatformService(ABC):
    """Interface for services producing a rating for one provider."""

    @abstractmethod
    async def get_rating(self, item: "Item") -> "Rating":
        """Get the provider rating for an item.

        Args:
            item: Item to rate.

        Returns:
            Rating, or an empty rating when the provider has none.

        Raises:
            RatingServiceError: If the provider request fails.
        """
        pass
