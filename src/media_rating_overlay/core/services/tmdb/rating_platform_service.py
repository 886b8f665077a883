"""TMDb rating platform service."""

from ....infrastructure.logging import LoggerMixin
from ....utils import RatingServiceError
from ...constants import RATING_SERVICE_TMDB, RATING_TYPE_AUDIENCE
from ...interfaces import IRatingPlatformService, ISearchService
from ...models import Item, Rating


class TMDbRatingPlatformService(IRatingPlatformService, LoggerMixin):
    """Turns TMDb search results into an audience rating.

    The first result is taken as the provider's best match. A vote of zero or less
    means TMDb has no usable score, which yields an empty rating rather than an error.
    """

    def __init__(self, search_service: ISearchService) -> None:
        self._search_service = search_service

    async def get_rating(self, item: Item) -> Rating:
        self.logger.debug(f"Retrieving TMDB rating for item {item.id}")

        try:
            results = await self._search_service.get_results(item)
        except RatingServiceError as e:
            self.logger.error(f"Unable to get TMDB results for item {item.id}: {e}")
            raise

        if not results:
            self.logger.debug(f"No results found for item {item.id}")
            return Rating()

        if len(results) > 1:
            self.logger.debug(
                f"Multiple results found for item {item.id}: "
                f"{[(result.id, result.title, result.vote) for result in results]}"
            )

        result = results[0]
        if result.vote > 0:
            # Kept at full float precision, not narrowed to float32
            self.logger.debug(f"TMDB rating found for item {item.id}: {result.vote}")
            return Rating(name=RATING_SERVICE_TMDB, rating=result.vote, type=RATING_TYPE_AUDIENCE)

        self.logger.debug(f"First result for item {item.id} has no positive vote")
        return Rating()
