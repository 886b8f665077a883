"""Infrastructure module for cross-cutting concerns."""

from .http_client import (
    RequestLogger,
    RetryClient,
    create_request_logger,
    redact_url,
    setup_request_logging,
)
from .logging import LoggerMixin, get_logger, setup_logging

__all__ = [
    "RetryClient",
    "RequestLogger",
    "create_request_logger",
    "redact_url",
    "setup_request_logging",
    "LoggerMixin",
    "get_logger",
    "setup_logging",
]
