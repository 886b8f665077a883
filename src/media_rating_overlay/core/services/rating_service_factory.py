"""Rating service factory."""

from typing import Any, Callable, Dict, List, Optional

import httpx

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import ConfigurationError
from ..constants import RATING_SERVICE_IMDB, RATING_SERVICE_ROTTEN_TOMATOES, RATING_SERVICE_TMDB
from ..models import RatingService
from .tmdb import TMDbClient, TMDbFilterService, TMDbRatingPlatformService, TMDbSearchService


class RatingServiceFactory(LoggerMixin):
    """Builds one rating service per provider from configuration.

    A disabled or unimplemented provider yields a service without a platform service.
    Transports created here are closed by ``close()`` or on context exit.
    """

    def __init__(
        self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        """Initialize factory.

        Args:
            config: Application configuration.
            transport: Optional httpx transport handed to every HTTP client, mainly for tests.
        """
        self._config = config
        self._transport = transport
        self._clients: List[TMDbClient] = []
        self._builders: Dict[str, Callable[[], RatingService]] = {
            RATING_SERVICE_TMDB: self.build_tmdb_components,
            RATING_SERVICE_ROTTEN_TOMATOES: self.build_rotten_tomatoes_components,
            RATING_SERVICE_IMDB: self.build_imdb_components,
        }

    def build_tmdb_components(self) -> RatingService:
        """Build the TMDB rating service.

        Raises:
            ConfigurationError: If TMDB is enabled but cannot be constructed.
        """
        self.logger.info("Building TMDB rating service components")

        tmdb_service = RatingService(name=RATING_SERVICE_TMDB)
        if not self._config.tmdb.enabled:
            return tmdb_service

        try:
            client = TMDbClient(
                self._config.tmdb,
                self._config.http,
                self._config.logger.log_file_path,
                transport=self._transport,
            )
        except ConfigurationError as e:
            self.logger.error(f"Error creating TMDB client: {e}")
            raise

        self._clients.append(client)
        filter_service = TMDbFilterService()
        search_service = TMDbSearchService(client, filter_service)
        tmdb_service.platform_service = TMDbRatingPlatformService(search_service)

        self.logger.info("TMDB rating service initialized")
        return tmdb_service

    def build_rotten_tomatoes_components(self) -> RatingService:
        self.logger.info("Building Rotten Tomatoes rating service")

        rotten_tomatoes_service = RatingService(name=RATING_SERVICE_ROTTEN_TOMATOES)

        # No Rotten Tomatoes platform service exists yet
        self.logger.info("Rotten Tomatoes rating service initialized")
        return rotten_tomatoes_service

    def build_imdb_components(self) -> RatingService:
        self.logger.info("Building IMDB rating service")

        imdb_service = RatingService(name=RATING_SERVICE_IMDB)

        # No IMDB platform service exists yet
        self.logger.info("IMDB rating service initialized")
        return imdb_service

    def create(self, service_name: str) -> RatingService:
        """Build the rating service for a provider label.

        Raises:
            ConfigurationError: If the provider is unknown or cannot be constructed.
        """
        builder = self._builders.get(service_name)
        if builder is None:
            raise ConfigurationError(f"unsupported rating service: {service_name}")
        return builder()

    def build_all(self) -> List[RatingService]:
        """Build every known provider, TMDB first."""
        return [builder() for builder in self._builders.values()]

    async def close(self) -> None:
        """Close every HTTP client created by this factory."""
        for client in self._clients:
            await client.close()
        self._clients.clear()

    async def __aenter__(self) -> "RatingServiceFactory":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
