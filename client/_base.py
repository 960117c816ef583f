"""Base classes for the terminal and files sub-clients.

This is an internal module and should not be imported directly by users.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from client._http import AsyncHTTPClient, HTTPClient


class BaseClient:
    """Base class for synchronous sub-clients.

    Attributes:
        _http: The shared HTTP client for making requests.
    """

    _BASE_PATH = ""

    def __init__(self, http_client: "HTTPClient") -> None:
        self._http = http_client

    def _get(self, path: str = "", params: dict[str, Any] | None = None) -> Any:
        """GET a path below the sub-client's base path."""
        return self._http.get(f"{self._BASE_PATH}{path}", params=params)

    def _post(self, path: str = "", json: dict[str, Any] | None = None) -> Any:
        """POST to a path below the sub-client's base path."""
        return self._http.post(f"{self._BASE_PATH}{path}", json=json)


class AsyncBaseClient:
    """Base class for asynchronous sub-clients.

    Attributes:
        _http: The shared async HTTP client for making requests.
    """

    _BASE_PATH = ""

    def __init__(self, http_client: "AsyncHTTPClient") -> None:
        self._http = http_client

    async def _get(self, path: str = "", params: dict[str, Any] | None = None) -> Any:
        """GET a path below the sub-client's base path."""
        return await self._http.get(f"{self._BASE_PATH}{path}", params=params)

    async def _post(self, path: str = "", json: dict[str, Any] | None = None) -> Any:
        """POST to a path below the sub-client's base path."""
        return await self._http.post(f"{self._BASE_PATH}{path}", json=json)
