"""TMDb API client."""

from typing import Optional

import httpx
from pydantic import ValidationError

from ....config.models import HTTPClientConfig, TMDbConfig
from ....infrastructure.http_client import RetryClient, create_request_logger, redact_url
from ....infrastructure.logging import LoggerMixin
from ....utils import (
    ConfigurationError,
    HTTPTransportError,
    NotAuthorizedError,
    NotFoundError,
    ResponseDecodeError,
)
from ...interfaces import IRatingClient
from .models import TMDbResponse

TMDB_BASE_URL = "https://api.themoviedb.org"
DEFAULT_LANGUAGE = "en"
DEFAULT_REGION = "en-US"


class TMDbClient(IRatingClient, LoggerMixin):
    """TMDb client adding credentials and locale to every request."""

    def __init__(
        self,
        tmdb_config: TMDbConfig,
        http_config: HTTPClientConfig,
        log_file_path: str,
        http_client: Optional[RetryClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize TMDb client.

        Args:
            tmdb_config: TMDb configuration.
            http_config: Shared HTTP transport configuration.
            log_file_path: File receiving request traces.
            http_client: Pre-built transport. If None, one is created from http_config.
            transport: Optional httpx transport for the created client, mainly for tests.

        Raises:
            ConfigurationError: If the API key is missing or request logging cannot be set up.
        """
        if not tmdb_config.api_key:
            self.logger.error("tmdb.api_key is required")
            raise ConfigurationError("tmdb.api_key is required")

        # Validated before any connection pool is opened
        request_logger = create_request_logger(log_file_path)

        if http_client is None:
            http_client = RetryClient(
                timeout=http_config.timeout,
                max_retries=http_config.max_retries,
                backoff_multiplier=http_config.backoff_multiplier,
                backoff_max=http_config.backoff_max,
                transport=transport,
            )
        http_client.add_plugin(request_logger)

        self._http_client = http_client
        self._api_key = tmdb_config.api_key
        self._language = tmdb_config.language
        self._region = tmdb_config.region
        self._base_url = httpx.URL(TMDB_BASE_URL)

    @property
    def http_client(self) -> RetryClient:
        return self._http_client

    async def do_with_response(self, request: httpx.Request) -> httpx.Response:
        """Decorate the request with credentials and locale, then send it."""
        self._setup_request(request)

        try:
            return await self._http_client.send(request)
        except HTTPTransportError as e:
            self.logger.error(
                f"Unable to perform request to TMDB API ({redact_url(request.url)}): {e}"
            )
            raise

    async def do_with_rating_response(self, request: httpx.Request) -> TMDbResponse:
        """Send the request and decode a TMDb search payload."""
        response = await self.do_with_response(request)
        try:
            return await self._parse_response(request, response)
        finally:
            await response.aclose()

    def get_base_url(self) -> httpx.URL:
        return self._base_url

    def _setup_request(self, request: httpx.Request) -> None:
        request.headers["Content-Type"] = "application/json"
        request.headers["Accept"] = "application/json"

        params = (
            request.url.params.add("api_key", self._api_key)
            .add("language", self._language or DEFAULT_LANGUAGE)
            .add("region", self._region or DEFAULT_REGION)
        )
        request.url = request.url.copy_with(params=params)

    async def _parse_response(
        self, request: httpx.Request, response: httpx.Response
    ) -> TMDbResponse:
        if response.status_code == 401:
            self.logger.error(
                f"Your TMDB API key is invalid or expired, please use a valid API key "
                f"(path={request.url.path}, status=401)"
            )
            raise NotAuthorizedError()

        if response.status_code == 404:
            self.logger.error(
                f"Cannot find the resource, please check the query "
                f"(path={request.url.path}, status=404)"
            )
            raise NotFoundError()

        try:
            body = await response.aread()
        except httpx.HTTPError as e:
            self.logger.error(
                f"Unable to read TMDB API response "
                f"(path={request.url.path}, status={response.status_code})"
            )
            raise HTTPTransportError(f"Unable to read TMDB response: {e}") from e

        try:
            return TMDbResponse.model_validate_json(body)
        except ValidationError as e:
            self.logger.error(
                f"Unable to decode TMDB API response "
                f"(path={request.url.path}, status={response.status_code})"
            )
            raise ResponseDecodeError(f"Unable to decode TMDB response: {e}") from e

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._http_client.aclose()
