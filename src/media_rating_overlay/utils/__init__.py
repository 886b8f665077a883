"""Utility functions and classes."""

from .exceptions import (
    ConfigurationError,
    HTTPTransportError,
    InvalidResponseTypeError,
    MediaRatingOverlayError,
    NotAuthorizedError,
    NotFoundError,
    RatingServiceError,
    RequestBuildError,
    ResponseDecodeError,
)

__all__ = [
    "MediaRatingOverlayError",
    "ConfigurationError",
    "RatingServiceError",
    "HTTPTransportError",
    "NotAuthorizedError",
    "NotFoundError",
    "ResponseDecodeError",
    "InvalidResponseTypeError",
    "RequestBuildError",
]
