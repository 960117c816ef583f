"""Unit tests for the VTS client HTTP utilities.

Covers client/_http.py:

1. Helper functions: error parsing, status mapping, backoff.
2. HTTPClient: requests, error mapping, retry.
3. AsyncHTTPClient: the same behaviour over httpx.AsyncClient.

These tests use httpx.MockTransport; no network access is needed. Backoff
sleeps are patched out.
"""

import httpx
import pytest

import client._http as http_module
from client._http import (
    DEFAULT_RETRY_BACKOFF_BASE,
    DEFAULT_RETRY_BACKOFF_MAX,
    AsyncHTTPClient,
    HTTPClient,
    _calculate_backoff,
    _parse_error_response,
    _raise_for_status,
)
from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)


@pytest.fixture(autouse=True)
def no_backoff_sleep(monkeypatch):
    """Make retry backoff instantaneous."""
    slept = []

    async def fake_async_sleep(delay):
        slept.append(delay)

    monkeypatch.setattr(http_module.time, "sleep", slept.append)
    monkeypatch.setattr(http_module.asyncio, "sleep", fake_async_sleep)
    return slept


def make_client(handler, **kwargs) -> HTTPClient:
    return HTTPClient(
        base_url="http://vts.test",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


# =============================================================================
# Helper functions
# =============================================================================


class TestParseErrorResponse:
    """Tests for _parse_error_response."""

    def test_server_handler_format(self):
        response = httpx.Response(
            404,
            json={"error": "File Not Found", "detail": "File 'x' not found", "path": "x"},
        )

        message, error_type, details = _parse_error_response(response)

        assert message == "File 'x' not found"
        assert error_type == "File Not Found"
        assert details == {"path": "x"}

    def test_fastapi_validation_list(self):
        response = httpx.Response(
            422,
            json={"detail": [{"loc": ["body", "command"], "msg": "Field required"}]},
        )

        message, error_type, details = _parse_error_response(response)

        assert message == "command: Field required"
        assert error_type == "validation_error"
        assert details["errors"][0]["msg"] == "Field required"

    def test_plain_text(self):
        response = httpx.Response(502, text="Bad Gateway")

        assert _parse_error_response(response) == ("Bad Gateway", None, None)

    def test_empty_body(self):
        response = httpx.Response(503)

        assert _parse_error_response(response) == ("HTTP 503 error", None, None)


class TestRaiseForStatus:
    """Tests for _raise_for_status."""

    def test_success_does_not_raise(self):
        _raise_for_status(httpx.Response(200, json={}))

    def test_404(self):
        response = httpx.Response(
            404, json={"error": "File Not Found", "detail": "missing", "path": "a/b"}
        )

        with pytest.raises(NotFoundError) as exc_info:
            _raise_for_status(response)

        assert exc_info.value.path == "a/b"
        assert exc_info.value.status_code == 404

    def test_422(self):
        with pytest.raises(ValidationError):
            _raise_for_status(httpx.Response(422, json={"detail": []}))

    def test_5xx(self):
        with pytest.raises(ServerError) as exc_info:
            _raise_for_status(httpx.Response(503, json={"detail": "down"}))

        assert exc_info.value.status_code == 503

    def test_other_4xx(self):
        with pytest.raises(APIError) as exc_info:
            _raise_for_status(
                httpx.Response(400, json={"error": "Invalid Value", "detail": "bad"})
            )

        assert type(exc_info.value) is APIError
        assert str(exc_info.value) == "[HTTP 400] [Invalid Value] bad"


class TestCalculateBackoff:
    """Tests for _calculate_backoff."""

    def test_doubles(self):
        assert _calculate_backoff(0) == DEFAULT_RETRY_BACKOFF_BASE
        assert _calculate_backoff(2) == DEFAULT_RETRY_BACKOFF_BASE * 4

    def test_capped(self):
        assert _calculate_backoff(20) == DEFAULT_RETRY_BACKOFF_MAX


# =============================================================================
# HTTPClient
# =============================================================================


class TestHTTPClient:
    """Tests for the synchronous HTTPClient."""

    def test_base_url_trailing_slash_stripped(self):
        client = HTTPClient(base_url="http://localhost:8000/")

        assert client.base_url == "http://localhost:8000"
        client.close()

    def test_get_drops_none_params(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=[])

        with make_client(handler) as client:
            assert client.get("/files", params={"path": None, "x": "1"}) == []

        assert seen["params"] == {"x": "1"}

    def test_post_sends_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/terminal/execute"
            return httpx.Response(200, content=request.content)

        with make_client(handler) as client:
            assert client.post("/terminal/execute", json={"command": "ls"}) == {"command": "ls"}

    def test_empty_body_returns_none(self):
        with make_client(lambda request: httpx.Response(204)) as client:
            assert client.post("/terminal/reset") is None

    def test_error_status_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "File Not Found", "detail": "nope"})

        with make_client(handler) as client:
            with pytest.raises(NotFoundError):
                client.get("/files/content", params={"path": "nope"})

    def test_no_retry_by_default(self, no_backoff_sleep):
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            return httpx.Response(503, json={"detail": "Unavailable"})

        with make_client(handler) as client:
            with pytest.raises(ServerError):
                client.get("/health")

        assert attempts == 1
        assert no_backoff_sleep == []

    def test_retry_on_503(self, no_backoff_sleep):
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            if attempts < 3:
                return httpx.Response(503, json={"detail": "Unavailable"})
            return httpx.Response(200, json={"status": "healthy"})

        with make_client(handler, retry_enabled=True, max_retries=3) as client:
            assert client.get("/health") == {"status": "healthy"}

        assert attempts == 3
        assert no_backoff_sleep == [0.5, 1.0]

    def test_retries_exhausted(self):
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            return httpx.Response(502, json={"detail": "Bad gateway"})

        with make_client(handler, retry_enabled=True, max_retries=2) as client:
            with pytest.raises(ServerError) as exc_info:
                client.get("/health")

        assert attempts == 3
        assert exc_info.value.status_code == 502

    def test_500_is_not_retried(self):
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            return httpx.Response(500, json={"detail": "boom"})

        with make_client(handler, retry_enabled=True) as client:
            with pytest.raises(ServerError):
                client.get("/health")

        assert attempts == 1

    def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused")

        with make_client(handler) as client:
            with pytest.raises(ConnectionError) as exc_info:
                client.get("/health")

        assert exc_info.value.url == "http://vts.test/health"

    def test_retry_on_connection_error(self):
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            if attempts < 2:
                raise httpx.ConnectError("Connection refused")
            return httpx.Response(200, json={"status": "healthy"})

        with make_client(handler, retry_enabled=True) as client:
            assert client.get("/health") == {"status": "healthy"}

        assert attempts == 2

    def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow")

        with make_client(handler, timeout=5.0) as client:
            with pytest.raises(TimeoutError) as exc_info:
                client.get("/health")

        assert exc_info.value.timeout == 5.0


# =============================================================================
# AsyncHTTPClient
# =============================================================================


class TestAsyncHTTPClient:
    """Tests for the asynchronous AsyncHTTPClient."""

    async def test_get(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "healthy"})

        async with AsyncHTTPClient(
            base_url="http://vts.test", transport=httpx.MockTransport(handler)
        ) as client:
            assert await client.get("/health") == {"status": "healthy"}

    async def test_error_status_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"detail": [{"loc": ["body"], "msg": "bad"}]})

        async with AsyncHTTPClient(
            base_url="http://vts.test", transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(ValidationError):
                await client.post("/terminal/execute", json={})

    async def test_retry_on_504(self, no_backoff_sleep):
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            if attempts < 2:
                return httpx.Response(504)
            return httpx.Response(200, json=[])

        async with AsyncHTTPClient(
            base_url="http://vts.test",
            retry_enabled=True,
            transport=httpx.MockTransport(handler),
        ) as client:
            assert await client.get("/files/recent") == []

        assert attempts == 2
        assert no_backoff_sleep == [0.5]

    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused")

        async with AsyncHTTPClient(
            base_url="http://vts.test", transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(ConnectionError):
                await client.get("/health")
