"""File browser endpoints.

These endpoints expose read-only views of the shared session's tree for a
file browser panel.
"""

from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from api.dependencies import TerminalSessionDep
from api.models import FileEntryResponse
from api.utils import normalize_browser_path, to_entry_responses

router = APIRouter(
    prefix="/files",
    tags=["files"],
)


class FileContentResponse(BaseModel):
    """Content of a single file.

    Attributes:
        path: Canonical path of the file.
        content: The stored text.
    """

    path: str
    content: str


@router.get("", response_model=list[FileEntryResponse])
async def list_files(
    session: TerminalSessionDep,
    path: Optional[str] = Query(default=None, description="Directory to list (root by default)"),
):
    """List the direct children of a directory, folders first.

    Args:
        session: The TerminalSession instance (injected by FastAPI).
        path: Directory to list.

    Returns:
        The directory's entries.

    Raises:
        NotADirectoryInTreeError: If the directory does not exist (404).
    """
    return to_entry_responses(session.list_files(normalize_browser_path(path)))


@router.get("/content", response_model=FileContentResponse)
async def read_file(
    session: TerminalSessionDep,
    path: str = Query(..., description="File to read"),
):
    """Read the content of a file.

    Raises:
        FileNotFoundInTreeError: If the file does not exist (404).
    """
    canonical = normalize_browser_path(path)
    return FileContentResponse(path=canonical, content=session.read_file(canonical))


@router.get("/recent", response_model=list[FileEntryResponse])
async def recent_files(session: TerminalSessionDep):
    """List recently edited files.

    The list is fixed and does not follow changes made in the terminal.
    """
    return to_entry_responses(session.get_recent_files())
