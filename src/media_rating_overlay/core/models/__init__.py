"""Core data models."""

from .item import Item
from .rating import Filter, Rating, SearchResult
from .rating_service import RatingService

__all__ = [
    "Item",
    "Filter",
    "Rating",
    "SearchResult",
    "RatingService",
]
