"""Test the item eligibility service."""

from unittest.mock import AsyncMock

from media_rating_overlay.core.interfaces import IRatingPlatformService
from media_rating_overlay.core.models import Item, Rating, RatingService
from media_rating_overlay.core.services import ItemEligibilityService


def tmdb_service():
    return RatingService(name="TMDB", platform_service=AsyncMock(spec=IRatingPlatformService))


def test_eligible_with_services(item):
    assert ItemEligibilityService([tmdb_service()]).is_eligible(item) is True


def test_not_eligible_when_flagged(item):
    """Test that an item flagged ineligible is always skipped."""
    flagged = item.model_copy(update={"is_eligible": False})

    assert ItemEligibilityService([tmdb_service()]).is_eligible(flagged) is False


def test_not_eligible_without_ratings_or_services(item):
    """Test that nothing can be shown without ratings or providers."""
    assert ItemEligibilityService([]).is_eligible(item) is False


def test_eligible_with_existing_ratings_only():
    """Test that existing ratings are enough when no provider is configured."""
    rated = Item(
        id="x",
        title="Inception",
        ratings=(Rating(name="TMDB", rating=8.8, type="audience"),),
    )

    assert ItemEligibilityService([]).is_eligible(rated) is True
