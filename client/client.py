"""Main VTS client classes.

This module provides the main entry points for the VTS API:
- VTSClient: Synchronous client for the VTS REST API
- AsyncVTSClient: Asynchronous client for the VTS REST API

Both clients expose the terminal and file browser endpoints through the
`terminal` and `files` sub-client properties.

Example:
    Synchronous usage::

        from client import VTSClient

        with VTSClient(base_url="http://localhost:8000") as client:
            client.terminal.execute("mkdir notes")
            client.terminal.execute("echo hi > notes/a.txt")
            print(client.files.read("notes/a.txt"))

    Asynchronous usage::

        from client import AsyncVTSClient

        async with AsyncVTSClient() as client:
            result = await client.terminal.execute("ls -l")
"""

from typing import Any

from client._files import AsyncFilesClient, FilesClient
from client._http import AsyncHTTPClient, HTTPClient
from client._terminal import AsyncTerminalClient, TerminalClient
from client.models import HealthResponse, WelcomeResponse


class VTSClient:
    """Synchronous client for the VTS REST API.

    Attributes:
        base_url: The base URL of the VTS server.
        timeout: Request timeout in seconds.
        retry_enabled: Whether automatic retry is enabled.
        max_retries: Maximum number of retry attempts.

    Example:
        Manual lifecycle management::

            client = VTSClient()
            try:
                client.terminal.execute("touch notes.txt")
            finally:
                client.close()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the VTS client.

        Args:
            base_url: The base URL of the VTS server.
            timeout: Request timeout in seconds.
            retry_enabled: Retry on connection errors, timeouts and HTTP
                502/503/504 with exponential backoff.
            max_retries: Maximum number of retry attempts when retry is enabled.
            transport: Custom HTTP transport (e.g. for testing against the app).
        """
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )

        # Sub-clients are created on first access
        self._terminal: TerminalClient | None = None
        self._files: FilesClient | None = None

    def __enter__(self) -> "VTSClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> float:
        return self._http.timeout

    @property
    def retry_enabled(self) -> bool:
        return self._http.retry_enabled

    @property
    def max_retries(self) -> int:
        return self._http.max_retries

    @property
    def terminal(self) -> TerminalClient:
        """Access the terminal endpoints (/terminal/*)."""
        if self._terminal is None:
            self._terminal = TerminalClient(self._http)
        return self._terminal

    @property
    def files(self) -> FilesClient:
        """Access the file browser endpoints (/files/*)."""
        if self._files is None:
            self._files = FilesClient(self._http)
        return self._files

    def health(self) -> HealthResponse:
        """Check that the server is up."""
        return HealthResponse(**self._http.get("/health"))

    def info(self) -> WelcomeResponse:
        """Fetch the server's welcome message and version."""
        return WelcomeResponse(**self._http.get("/"))


class AsyncVTSClient:
    """Asynchronous client for the VTS REST API.

    Mirrors VTSClient with awaitable methods.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        self._http = AsyncHTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )

        self._terminal: AsyncTerminalClient | None = None
        self._files: AsyncFilesClient | None = None

    async def __aenter__(self) -> "AsyncVTSClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def terminal(self) -> AsyncTerminalClient:
        """Access the terminal endpoints (/terminal/*)."""
        if self._terminal is None:
            self._terminal = AsyncTerminalClient(self._http)
        return self._terminal

    @property
    def files(self) -> AsyncFilesClient:
        """Access the file browser endpoints (/files/*)."""
        if self._files is None:
            self._files = AsyncFilesClient(self._http)
        return self._files

    async def health(self) -> HealthResponse:
        """Check that the server is up."""
        return HealthResponse(**(await self._http.get("/health")))

    async def info(self) -> WelcomeResponse:
        """Fetch the server's welcome message and version."""
        return WelcomeResponse(**(await self._http.get("/")))
