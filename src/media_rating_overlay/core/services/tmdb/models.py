"""TMDb API payload models."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ...interfaces import RatingResponse


class TMDbEntry(BaseModel):
    """Single movie entry of a TMDb search response."""

    id: int = Field(..., description="TMDb movie ID")
    adult: bool = Field(default=False, description="Adult content flag")
    title: str = Field(default="", description="Localized title")
    original_title: str = Field(default="", description="Original title")
    vote: float = Field(default=0.0, alias="vote_average", description="Average vote")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title", "original_title", "vote", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        """TMDb sends null for missing titles and votes."""
        if v is None:
            return 0.0 if info.field_name == "vote" else ""
        return v


class TMDbResponse(BaseModel, RatingResponse):
    """TMDb search response."""

    page: int = Field(default=0, description="Result page")
    results: List[TMDbEntry] = Field(default_factory=list, description="Search results")
