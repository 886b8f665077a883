"""Rating service composition model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..interfaces import IRatingPlatformService


class RatingService(BaseModel):
    """Provider label plus its platform service, when the provider is available."""

    name: str = Field(default="", description="Provider label")
    platform_service: Optional[IRatingPlatformService] = Field(
        default=None, description="Rating platform service, absent when unavailable"
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def is_available(self) -> bool:
        """Whether ratings can be requested from this provider."""
        return self.platform_service is not None
