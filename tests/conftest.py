"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from media_rating_overlay.config import (
    Config,
    ConfigManager,
    HTTPClientConfig,
    LoggingConfig,
    TMDbConfig,
)
from media_rating_overlay.core.models import Item


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file."""
    config_content = f"""
tmdb:
  enabled: true
  api_key: "test-tmdb-key"
  language: "en"
  region: "US"

imdb:
  enabled: false

rotten:
  enabled: false

http:
  timeout: 5
  max_retries: 2

logger:
  level: "debug"
  log_file_path: "{tmp_path / 'logs' / 'test.log'}"
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file)


@pytest.fixture
def log_file(tmp_path):
    """Path of a request log file inside the test directory."""
    return str(tmp_path / "requests.log")


@pytest.fixture
def tmdb_config():
    """Enabled TMDb configuration."""
    return TMDbConfig(enabled=True, api_key="K", language="en", region="US")


@pytest.fixture
def http_config():
    """HTTP configuration without backoff delays."""
    return HTTPClientConfig(timeout=5, max_retries=2, backoff_multiplier=0, backoff_max=1)


@pytest.fixture
def config(tmdb_config, http_config, log_file):
    """Application configuration with TMDb enabled."""
    return Config(
        tmdb=tmdb_config,
        http=http_config,
        logger=LoggingConfig(log_file_path=log_file, use_stdout=False),
    )


@pytest.fixture
def item():
    """Sample movie item."""
    return Item(id="x", title="Inception", year=2010, type="movie")


def stream_response(status_code: int, body: Any) -> httpx.Response:
    """Build a response whose body stays open until read or closed."""
    content = json.dumps(body) if isinstance(body, (dict, list)) else body
    return httpx.Response(
        status_code,
        headers={"Content-Type": "application/json"},
        stream=httpx.ByteStream(content.encode("utf-8")),
    )


@pytest.fixture
def make_response():
    """Factory for streaming responses, see ``stream_response``."""
    return stream_response


class InterruptedStream(httpx.AsyncByteStream):
    """Body stream whose connection drops after the first chunk."""

    def __init__(self, first_chunk: bytes) -> None:
        self._first_chunk = first_chunk

    async def __aiter__(self):
        yield self._first_chunk
        raise httpx.ReadError("connection reset mid-body")


def interrupted_response(*args: Any) -> httpx.Response:
    """200 response whose body fails partway through a TMDb payload."""
    return httpx.Response(
        200,
        headers={"Content-Type": "application/json"},
        stream=InterruptedStream(b'{"page": 1, '),
    )


@pytest.fixture
def make_interrupted_response():
    """Factory for responses dropping the connection mid-body."""
    return interrupted_response


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_transport(recorded_requests) -> Callable[..., httpx.MockTransport]:
    """Build a mock transport answering with the given responses in order.

    Each response is a ``(status_code, body)`` tuple, an exception instance to raise,
    or a callable building a fresh ``httpx.Response`` from the request.
    The last response is repeated once the list is exhausted.
    """

    def _make(*responses: Any) -> httpx.MockTransport:
        queue = list(responses)

        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            current = queue.pop(0) if len(queue) > 1 else queue[0]
            if isinstance(current, Exception):
                raise current
            if callable(current):
                return current(request)
            status_code, body = current
            return stream_response(status_code, body)

        return httpx.MockTransport(handler)

    return _make


def _tmdb_entry(id: int, title: str, vote: float, **extra: Any) -> Dict[str, Any]:
    entry = {
        "id": id,
        "adult": False,
        "title": title,
        "original_title": title,
        "vote_average": vote,
    }
    entry.update(extra)
    return entry


def _tmdb_payload(*entries: Dict[str, Any], page: int = 1) -> Dict[str, Any]:
    return {"page": page, "results": list(entries)}


@pytest.fixture
def tmdb_entry():
    """Factory for TMDb search result entries."""
    return _tmdb_entry


@pytest.fixture
def tmdb_payload():
    """Factory for TMDb search response bodies."""
    return _tmdb_payload


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests running the full provider stack")
