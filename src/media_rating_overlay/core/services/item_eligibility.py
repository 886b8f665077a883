"""Item eligibility service."""

from typing import Sequence

from ...infrastructure.logging import LoggerMixin
from ..models import Item, RatingService


class ItemEligibilityService(LoggerMixin):
    """Decides whether an item should go through rating at all."""

    def __init__(self, rating_services: Sequence[RatingService]) -> None:
        self._rating_services = list(rating_services)

    def is_eligible(self, item: Item) -> bool:
        self.logger.debug(f"Checking if item {item.id} is eligible")

        if not item.is_eligible:
            self.logger.debug(f"Item {item.id} ({item.title}) is not eligible, skipping")
            return False

        if not item.ratings and not self._rating_services:
            self.logger.debug(f"Item {item.id} ({item.title}) has no ratings to show, skipping")
            return False

        return True
