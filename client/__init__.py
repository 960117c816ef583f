"""VTS API Client Library.

Python client for the VTS (Virtual Terminal Simulator) REST API, with
synchronous and asynchronous variants.

Example:
    Synchronous usage::

        from client import VTSClient

        with VTSClient(base_url="http://localhost:8000") as client:
            result = client.terminal.execute("ls -l")
            print(result.output)

    Asynchronous usage::

        from client import AsyncVTSClient

        async with AsyncVTSClient() as client:
            entries = await client.files.list("src")

Exports:
    VTSClient: Synchronous client for the VTS REST API.
    AsyncVTSClient: Asynchronous client for the VTS REST API.

    Exceptions:
        VTSClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        ValidationError: Request validation failed (HTTP 422).
        NotFoundError: File or directory not found (HTTP 404).
        ServerError: Server-side error (HTTP 5xx).
"""

from client._files import AsyncFilesClient, FileContentResponse, FilesClient
from client._terminal import (
    AsyncTerminalClient,
    ExecuteResponse,
    HistoryResponse,
    ResetResponse,
    TerminalClient,
    TerminalStateResponse,
)
from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
    VTSClientError,
)
from client.models import (
    ErrorResponse,
    FileEntryResponse,
    HealthResponse,
    HistoryEntryResponse,
    WelcomeResponse,
)
from client.client import AsyncVTSClient, VTSClient

__all__ = [
    # Main clients
    "VTSClient",
    "AsyncVTSClient",
    # Sub-clients
    "TerminalClient",
    "AsyncTerminalClient",
    "FilesClient",
    "AsyncFilesClient",
    # Response models
    "ExecuteResponse",
    "TerminalStateResponse",
    "HistoryResponse",
    "ResetResponse",
    "FileContentResponse",
    "FileEntryResponse",
    "HistoryEntryResponse",
    "HealthResponse",
    "WelcomeResponse",
    "ErrorResponse",
    # Exceptions
    "VTSClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "ValidationError",
    "NotFoundError",
    "ServerError",
]
