"""Rating-related data models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Filter(BaseModel):
    """Query parameter to apply to a provider request."""

    name: str = Field(..., description="Query parameter name")
    value: str = Field(..., description="Query parameter value")


class SearchResult(BaseModel):
    """Provider-neutral search result."""

    id: int = Field(..., description="Provider identifier")
    title: str = Field(default="", description="Title as reported by the provider")
    vote: float = Field(default=0.0, description="Audience score on a 0-10 scale")


class Rating(BaseModel):
    """Rating for a single provider.

    A default-constructed rating means no rating is available, which is not an error.
    """

    name: str = Field(default="", description="Provider label")
    rating: float = Field(default=0.0, description="Rating value")
    type: Literal["critic", "audience", ""] = Field(
        default="", description="Rating type"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        """Whether this rating carries no value."""
        return self == Rating()
