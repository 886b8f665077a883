"""Rating client interface."""

from abc import ABC, abstractmethod

import httpx


class RatingResponse:
    """Marker base class for provider-specific response payloads.

    Payloads only travel between a provider's client and its search service.
    """


class IRatingClient(ABC):
    """Interface for rating provider HTTP clients."""

    @abstractmethod
    async def do_with_response(self, request: httpx.Request) -> httpx.Response:
        """Decorate the request with provider credentials and send it.

        Args:
            request: Request to send.

        Returns:
            Raw response. The caller must close it.

        Raises:
            HTTPTransportError: If the request could not be completed.
        """
        pass

    @abstractmethod
    async def do_with_rating_response(self, request: httpx.Request) -> RatingResponse:
        """Send the request and decode the provider payload.

        Args:
            request: Request to send.

        Returns:
            Provider-specific payload.

        Raises:
            NotAuthorizedError: On HTTP 401.
            NotFoundError: On HTTP 404.
            ResponseDecodeError: If the body is not a valid payload.
            HTTPTransportError: If the request could not be completed.
        """
        pass

    @abstractmethod
    def get_base_url(self) -> httpx.URL:
        """Get the provider base URL used to build requests."""
        pass
