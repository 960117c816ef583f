"""File browser sub-client for the VTS API.

This module provides FilesClient and AsyncFilesClient for the read-only
file browser endpoints (/files/*).

This is an internal module. Import from `client` instead.
"""

from pydantic import BaseModel

from client._base import AsyncBaseClient, BaseClient
from client.models import FileEntryResponse


class FileContentResponse(BaseModel):
    """Content of a single file.

    Attributes:
        path: Canonical path of the file.
        content: The stored text.
    """

    path: str
    content: str


class FilesClient(BaseClient):
    """Synchronous client for the file browser endpoints (/files/*).

    Example:
        with VTSClient() as client:
            for entry in client.files.list("src"):
                print(entry.type, entry.path)
            print(client.files.read("package.json"))
    """

    _BASE_PATH = "/files"

    def read(self, path: str) -> str:
        """Return the content of a file.

        Raises:
            NotFoundError: If the file does not exist.
        """
        return self.read_entry(path).content

    def read_entry(self, path: str) -> FileContentResponse:
        """Return a file's canonical path together with its content."""
        data = self._get("/content", params={"path": path})
        return FileContentResponse(**data)

    def recent(self) -> list[FileEntryResponse]:
        """List recently edited files."""
        data = self._get("/recent")
        return [FileEntryResponse(**entry) for entry in data]

    # defined last: the name shadows the builtin inside the class body
    def list(self, path: str = "") -> list[FileEntryResponse]:
        """List the direct children of a directory, folders first.

        Args:
            path: Directory to list (root by default).

        Raises:
            NotFoundError: If the directory does not exist.
        """
        data = self._get(params={"path": path or None})
        return [FileEntryResponse(**entry) for entry in data]


class AsyncFilesClient(AsyncBaseClient):
    """Asynchronous client for the file browser endpoints (/files/*)."""

    _BASE_PATH = "/files"

    async def read(self, path: str) -> str:
        """Return the content of a file."""
        return (await self.read_entry(path)).content

    async def read_entry(self, path: str) -> FileContentResponse:
        """Return a file's canonical path together with its content."""
        data = await self._get("/content", params={"path": path})
        return FileContentResponse(**data)

    async def recent(self) -> list[FileEntryResponse]:
        """List recently edited files."""
        data = await self._get("/recent")
        return [FileEntryResponse(**entry) for entry in data]

    async def list(self, path: str = "") -> list[FileEntryResponse]:
        """List the direct children of a directory, folders first."""
        data = await self._get(params={"path": path or None})
        return [FileEntryResponse(**entry) for entry in data]
