"""Search service interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..models import Item, SearchResult


class ISearchService(ABC):
    """Interface for provider search services."""

    @abstractmethod
    async def get_results(self, item: "Item") -> List["SearchResult"]:
        """Search the provider for an item.

        Args:
            item: Item to search for.

        Returns:
            Provider-neutral results, in provider ranking order.

        Raises:
            RatingServiceError: If the search fails.
        """
        pass
