"""Filter service interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable

import httpx

if TYPE_CHECKING:
    from ..models import Filter


class IFilterService(ABC):
    """Interface for applying query filters to provider requests."""

    @abstractmethod
    def apply_filters_to_request(self, request: httpx.Request, filters: Iterable["Filter"]) -> None:
        """Add filters to the request query string.

        Filters with an empty name or value are ignored. Existing parameters are kept.

        Args:
            request: Request to update in place.
            filters: Filters to add.
        """
        pass
