"""Unit tests for the VTS client exception hierarchy."""

import builtins

import pytest

from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
    VTSClientError,
)


class TestHierarchy:
    """Every client exception derives from VTSClientError."""

    @pytest.mark.parametrize(
        "exc",
        [
            ConnectionError("down"),
            TimeoutError("slow"),
            APIError("bad", status_code=400),
            ValidationError("invalid"),
            NotFoundError("missing"),
            ServerError("boom"),
        ],
    )
    def test_catchable_as_base(self, exc):
        with pytest.raises(VTSClientError):
            raise exc

    def test_api_subclasses(self):
        assert issubclass(ValidationError, APIError)
        assert issubclass(NotFoundError, APIError)
        assert issubclass(ServerError, APIError)

    def test_does_not_shadow_builtins(self):
        assert not issubclass(ConnectionError, builtins.ConnectionError)
        assert not issubclass(TimeoutError, builtins.TimeoutError)


class TestConnectionError:
    def test_str_with_url(self):
        cause = OSError("refused")
        exc = ConnectionError("Failed to connect", url="http://x/health", cause=cause)

        assert str(exc) == "Failed to connect (url: http://x/health)"
        assert exc.cause is cause

    def test_str_without_url(self):
        assert str(ConnectionError("Failed to connect")) == "Failed to connect"


class TestTimeoutError:
    def test_str_with_timeout(self):
        exc = TimeoutError("Request timed out", timeout=2.5)

        assert str(exc) == "Request timed out (timeout: 2.5s)"

    def test_str_without_timeout(self):
        assert str(TimeoutError("Request timed out")) == "Request timed out"


class TestAPIErrors:
    def test_api_error_str(self):
        exc = APIError("bad", status_code=400, error_type="Invalid Value")

        assert str(exc) == "[HTTP 400] [Invalid Value] bad"

    def test_api_error_str_without_type(self):
        assert str(APIError("bad", status_code=418)) == "[HTTP 418] bad"

    def test_validation_error(self):
        exc = ValidationError("command: Field required", details={"errors": []})

        assert exc.status_code == 422
        assert exc.error_type == "validation_error"
        assert exc.details == {"errors": []}

    def test_not_found_path(self):
        exc = NotFoundError("File 'a.txt' not found", details={"path": "a.txt"})

        assert exc.status_code == 404
        assert exc.path == "a.txt"

    def test_not_found_without_details(self):
        assert NotFoundError("missing").path is None

    def test_server_error_status(self):
        assert ServerError("down", status_code=503).status_code == 503
        assert ServerError("boom").status_code == 500
