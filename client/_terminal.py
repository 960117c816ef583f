"""Terminal sub-client for the VTS API.

This module provides TerminalClient and AsyncTerminalClient for the
terminal endpoints (/terminal/*).

This is an internal module. Import from `client` instead.
"""

from pydantic import BaseModel

from client._base import AsyncBaseClient, BaseClient
from client.models import HistoryEntryResponse


# Response models for terminal endpoints


class ExecuteResponse(BaseModel):
    """Result of an executed command line.

    Attributes:
        output: Output to display, or "CLEAR_TERMINAL" after `clear`.
        new_directory: Working directory after the command.
        clear: Whether the display should be cleared.
    """

    output: str
    new_directory: str
    clear: bool


class TerminalStateResponse(BaseModel):
    """Snapshot of the server's terminal session.

    Attributes:
        session_id: Identifier of the session.
        current_directory: Current working directory.
        directory_count: Number of directories in the tree (root included).
        file_count: Number of files in the tree.
        history_length: Number of recorded command lines.
        summary: Human-readable tree size.
        validation_errors: Tree invariant violations (normally empty).
    """

    session_id: str
    current_directory: str
    directory_count: int
    file_count: int
    history_length: int
    summary: str
    validation_errors: list[str]


class HistoryResponse(BaseModel):
    """Command history of the server's terminal session."""

    entries: list[HistoryEntryResponse]
    count: int


class ResetResponse(BaseModel):
    """Confirmation of a session reset."""

    message: str
    summary: str


def _execute_body(command: str, current_directory: str | None) -> dict:
    body = {"command": command}
    if current_directory is not None:
        body["current_directory"] = current_directory
    return body


# Synchronous TerminalClient


class TerminalClient(BaseClient):
    """Synchronous client for the terminal endpoints (/terminal/*).

    Example:
        with VTSClient() as client:
            result = client.terminal.execute("mkdir -p build/out")
            result = client.terminal.execute("ls", current_directory="build")
            print(result.output)
    """

    _BASE_PATH = "/terminal"

    def execute(self, command: str, current_directory: str | None = None) -> ExecuteResponse:
        """Execute one command line on the server.

        Command failures come back as output text, never as exceptions.

        Args:
            command: The command line as typed.
            current_directory: Working directory to run in. Defaults to the
                server session's current directory.

        Returns:
            The output, new working directory and clear flag.

        Raises:
            ValidationError: If the request body is malformed.
            APIError: If the request fails.
        """
        data = self._post("/execute", json=_execute_body(command, current_directory))
        return ExecuteResponse(**data)

    def get_state(self) -> TerminalStateResponse:
        """Get a snapshot of the session and its tree."""
        data = self._get("/state")
        return TerminalStateResponse(**data)

    def get_history(self) -> HistoryResponse:
        """Get the executed command lines, oldest first."""
        data = self._get("/history")
        return HistoryResponse(**data)

    def reset(self) -> ResetResponse:
        """Restore the seed tree and clear the working directory and history."""
        data = self._post("/reset")
        return ResetResponse(**data)


# Asynchronous AsyncTerminalClient


class AsyncTerminalClient(AsyncBaseClient):
    """Asynchronous client for the terminal endpoints (/terminal/*).

    Example:
        async with AsyncVTSClient() as client:
            result = await client.terminal.execute("cat README.md")
    """

    _BASE_PATH = "/terminal"

    async def execute(
        self, command: str, current_directory: str | None = None
    ) -> ExecuteResponse:
        """Execute one command line on the server.

        See TerminalClient.execute.
        """
        data = await self._post("/execute", json=_execute_body(command, current_directory))
        return ExecuteResponse(**data)

    async def get_state(self) -> TerminalStateResponse:
        """Get a snapshot of the session and its tree."""
        data = await self._get("/state")
        return TerminalStateResponse(**data)

    async def get_history(self) -> HistoryResponse:
        """Get the executed command lines, oldest first."""
        data = await self._get("/history")
        return HistoryResponse(**data)

    async def reset(self) -> ResetResponse:
        """Restore the seed tree and clear the working directory and history."""
        data = await self._post("/reset")
        return ResetResponse(**data)
