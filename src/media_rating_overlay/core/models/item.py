"""Media item model."""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .rating import Rating


class Item(BaseModel):
    """Media item to be rated."""

    id: str = Field(default="", description="Media library identifier")
    title: str = Field(..., description="Item title")
    year: Optional[int] = Field(None, description="Release year")
    type: Literal["movie", "show"] = Field(default="movie", description="Media type")
    ratings: Tuple[Rating, ...] = Field(default=(), description="Ratings already known")
    is_eligible: bool = Field(default=True, description="Whether the item should be rated")

    model_config = ConfigDict(frozen=True)

    def has_rating_from(self, name: str) -> bool:
        """Whether a rating from the given provider is already attached."""
        return any(rating.name == name for rating in self.ratings)
