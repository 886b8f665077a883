"""Custom exceptions for the application."""


class MediaRatingOverlayError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(MediaRatingOverlayError):
    """Configuration-related errors."""

    pass


class RatingServiceError(MediaRatingOverlayError):
    """Rating provider errors."""

    pass


class HTTPTransportError(RatingServiceError):
    """Request could not be completed after retries."""

    pass


class NotAuthorizedError(RatingServiceError):
    """Provider rejected the credential (HTTP 401)."""

    def __init__(self, message: str = "not authorized") -> None:
        super().__init__(message)


class NotFoundError(RatingServiceError):
    """Provider could not find the requested resource (HTTP 404)."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class ResponseDecodeError(RatingServiceError):
    """Provider response body could not be decoded."""

    pass


class InvalidResponseTypeError(RatingServiceError):
    """Client returned a payload of an unexpected provider type."""

    def __init__(self, message: str = "invalid response type") -> None:
        super().__init__(message)


class RequestBuildError(RatingServiceError):
    """Provider request could not be built."""

    pass
