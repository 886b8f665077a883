"""TMDb filter service."""

from typing import Iterable

import httpx

from ...interfaces import IFilterService
from ...models import Filter


class TMDbFilterService(IFilterService):
    """Adds non-empty filters to a request query string."""

    def apply_filters_to_request(self, request: httpx.Request, filters: Iterable[Filter]) -> None:
        params = request.url.params

        for query_filter in filters:
            if query_filter.name and query_filter.value:
                params = params.add(query_filter.name, query_filter.value)

        request.url = request.url.copy_with(params=params)
