"""HTTP transport with retries and request logging."""

import asyncio
import logging
import time
from typing import Dict, List, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    before_sleep_log,
    retry_if_exception,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from ..utils.exceptions import ConfigurationError, HTTPTransportError
from .logging import LoggerMixin, get_logger

REQUEST_LOGGER_NAME = "media_rating_overlay.http.requests"

logger = get_logger(__name__)


def redact_url(url: httpx.URL) -> str:
    """Return the URL without query string or fragment.

    Provider credentials travel in the query string, so only this form is logged.
    """
    return str(url.copy_with(query=None, fragment=None))


def _is_retryable_status(status_code: int) -> bool:
    return status_code == 429 or 500 <= status_code < 600


def _is_retryable_exception(exc: BaseException) -> bool:
    return isinstance(exc, httpx.TransportError) and not isinstance(
        exc, httpx.TimeoutException
    )


def _is_retryable_response(response: httpx.Response) -> bool:
    return _is_retryable_status(response.status_code)


class RequestLogger:
    """Plugin writing one line per request attempt to a logger.

    When built with ``handler``, the plugin owns it and releases it on ``close()``.
    """

    def __init__(self, out: logging.Logger, handler: Optional[logging.Handler] = None) -> None:
        self._out = out
        self._handler = handler
        self._started: Dict[int, float] = {}

    def on_request_start(self, request: httpx.Request) -> None:
        self._started[id(request)] = time.monotonic()

    def on_request_end(self, request: httpx.Request, response: httpx.Response) -> None:
        self._out.info(
            f"{request.method} {redact_url(request.url)} {response.status_code} "
            f"[{self._elapsed_ms(request)}ms]"
        )

    def on_error(self, request: httpx.Request, error: BaseException) -> None:
        self._out.error(
            f"{request.method} {redact_url(request.url)} ERROR: {error} "
            f"[{self._elapsed_ms(request)}ms]"
        )

    def close(self) -> None:
        """Detach and close the owned handler, if any."""
        if self._handler is None:
            return
        self._out.removeHandler(self._handler)
        self._handler.close()
        self._handler = None

    def _elapsed_ms(self, request: httpx.Request) -> int:
        started = self._started.pop(id(request), None)
        if started is None:
            return 0
        return int((time.monotonic() - started) * 1000)


class RetryClient(LoggerMixin):
    """Async HTTP client with per-attempt timeout and bounded retries.

    Connection errors, HTTP 429 and HTTP 5xx are retried with exponential backoff.
    Timeouts and other 4xx responses are returned or raised immediately.
    """

    def __init__(
        self,
        timeout: float,
        max_retries: int,
        backoff_multiplier: float = 0.5,
        backoff_max: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize retry client.

        Args:
            timeout: Per-attempt timeout in seconds, covering the whole exchange.
            max_retries: Number of retries after the first attempt.
            backoff_multiplier: Exponential backoff multiplier in seconds.
            backoff_max: Upper bound for a single backoff wait in seconds.
            transport: Optional httpx transport, mainly for tests.
        """
        self._timeout = timeout
        self._max_retries = max_retries
        self._backoff_multiplier = backoff_multiplier
        self._backoff_max = backoff_max
        self._plugins: List[RequestLogger] = []
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport)

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def timeout(self) -> float:
        return self._timeout

    def add_plugin(self, plugin: RequestLogger) -> None:
        """Register a request logging plugin. It is closed with the client."""
        self._plugins.append(plugin)

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request, retrying transient failures.

        The body is read within the attempt, so the returned response is already
        buffered. When retries are exhausted on a retryable status, the last
        response is returned.

        Raises:
            HTTPTransportError: On network errors after retries, or on timeout.
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_retries + 1),
            wait=wait_exponential(multiplier=self._backoff_multiplier, max=self._backoff_max),
            retry=(
                retry_if_exception(_is_retryable_exception)
                | retry_if_result(_is_retryable_response)
            ),
            before_sleep=before_sleep_log(self.logger, logging.WARNING),
            retry_error_callback=self._on_retries_exhausted,
        )

        try:
            return await retrying(self._send_once, request)
        except httpx.HTTPError as e:
            self.logger.error(
                f"Request to {redact_url(request.url)} failed: {type(e).__name__}"
            )
            raise HTTPTransportError(
                f"{request.method} {redact_url(request.url)} failed: {e}"
            ) from e

    async def _send_once(self, request: httpx.Request) -> httpx.Response:
        for plugin in self._plugins:
            plugin.on_request_start(request)

        try:
            response = await asyncio.wait_for(self._exchange(request), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            error = httpx.TimeoutException(
                f"attempt exceeded {self._timeout}s timeout", request=request
            )
            for plugin in self._plugins:
                plugin.on_error(request, error)
            raise error from e
        except httpx.HTTPError as e:
            for plugin in self._plugins:
                plugin.on_error(request, e)
            raise

        for plugin in self._plugins:
            plugin.on_request_end(request, response)

        return response

    async def _exchange(self, request: httpx.Request) -> httpx.Response:
        response = await self._client.send(request, stream=True)
        try:
            await response.aread()
        finally:
            await response.aclose()
        return response

    @staticmethod
    def _on_retries_exhausted(retry_state: RetryCallState) -> httpx.Response:
        # Returns the last response, or re-raises the last exception
        return retry_state.outcome.result()  # type: ignore

    async def aclose(self) -> None:
        """Close pooled connections and the registered plugins."""
        await self._client.aclose()
        for plugin in self._plugins:
            plugin.close()
        self._plugins.clear()


def create_request_logger(log_file_path: str) -> RequestLogger:
    """Build a request logger appending to the given file.

    Each request logger owns its logger and file handler, so traces of one client
    never reach the file of another.

    Args:
        log_file_path: File receiving one line per request attempt.

    Raises:
        ConfigurationError: If the path is empty or the file cannot be opened.
    """
    if not log_file_path:
        raise ConfigurationError("logger.log_file_path is required")

    try:
        handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Unable to open request log file {log_file_path}: {e}") from e

    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))

    # Not registered with the logging manager, so it is released with the plugin
    request_logger = logging.Logger(REQUEST_LOGGER_NAME, logging.INFO)
    request_logger.propagate = False
    request_logger.addHandler(handler)

    logger.debug(f"Request logging enabled to {log_file_path}")
    return RequestLogger(request_logger, handler)


def setup_request_logging(client: RetryClient, log_file_path: str) -> None:
    """Attach request tracing to a client, appending to the given file.

    Raises:
        ConfigurationError: If the path is empty or the file cannot be opened.
    """
    client.add_plugin(create_request_logger(log_file_path))
