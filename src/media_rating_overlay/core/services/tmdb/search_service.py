"""TMDb search service."""

from typing import List

import httpx

from ....infrastructure.logging import LoggerMixin
from ....utils import InvalidResponseTypeError, RatingServiceError, RequestBuildError
from ...interfaces import IFilterService, IRatingClient, ISearchService
from ...models import Filter, Item, SearchResult
from .models import TMDbEntry, TMDbResponse

SEARCH_MOVIE_PATH = "/3/search/movie"


class TMDbSearchService(ISearchService, LoggerMixin):
    """Searches TMDb movies by title and year."""

    def __init__(self, client: IRatingClient, filter_service: IFilterService) -> None:
        """Initialize TMDb search service.

        Args:
            client: TMDb client.
            filter_service: Service applying query filters.
        """
        self._client = client
        self._filter_service = filter_service

    async def get_results(self, item: Item) -> List[SearchResult]:
        """Search TMDb for an item.

        Args:
            item: Item to search for.

        Returns:
            Search results in TMDb ranking order.

        Raises:
            RequestBuildError: If the search endpoint is malformed.
            InvalidResponseTypeError: If the client returned a non-TMDb payload.
            RatingServiceError: If the request fails.
        """
        try:
            endpoint = self._client.get_base_url().join(SEARCH_MOVIE_PATH)
            request = httpx.Request("GET", endpoint)
        except httpx.InvalidURL as e:
            self.logger.error(
                f"Unable to build request (method=get_results, path={SEARCH_MOVIE_PATH}): {e}"
            )
            raise RequestBuildError(f"Unable to build TMDB search request: {e}") from e

        filters = [
            Filter(name="query", value=item.title),
            Filter(name="year", value="" if item.year is None else str(item.year)),
        ]
        self._filter_service.apply_filters_to_request(request, filters)

        try:
            response = await self._client.do_with_rating_response(request)
        except RatingServiceError as e:
            self.logger.error(
                f"Unable to perform request to TMDB client "
                f"(method=get_results, item_id={item.id}): {e}"
            )
            raise

        if not isinstance(response, TMDbResponse):
            self.logger.error(
                f"Unable to cast response to TMDB response "
                f"(method=get_results, item_id={item.id}, type={type(response).__name__})"
            )
            raise InvalidResponseTypeError()

        return self._to_search_results(response.results)

    @staticmethod
    def _to_search_results(entries: List[TMDbEntry]) -> List[SearchResult]:
        return [SearchResult(id=entry.id, title=entry.title, vote=entry.vote) for entry in entries]
