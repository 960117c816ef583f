"""Terminal endpoints.

These endpoints let clients run command lines against the shared session and
inspect or reset its state.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import TerminalSessionDep
from api.models import HistoryEntryResponse
from api.utils import normalize_browser_path

router = APIRouter(
    prefix="/terminal",
    tags=["terminal"],
)


class ExecuteRequest(BaseModel):
    """Request model for executing a command line.

    Attributes:
        command: The raw command line as typed.
        current_directory: Working directory to run in; defaults to the
            session's own.
    """

    command: str = Field(..., description="Command line to execute")
    current_directory: Optional[str] = Field(
        default=None,
        description="Working directory (canonical or with a leading slash)",
    )


class ExecuteResponse(BaseModel):
    """Response model for an executed command line.

    Attributes:
        output: Output to display, or "CLEAR_TERMINAL" when the display
            should be cleared.
        new_directory: Working directory after the command.
        clear: Whether the display should be cleared.
    """

    output: str
    new_directory: str
    clear: bool


class TerminalStateResponse(BaseModel):
    """Snapshot of the shared session.

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
    """Command history of the shared session.

    Attributes:
        entries: Executed command lines, oldest first.
        count: Number of entries.
    """

    entries: list[HistoryEntryResponse]
    count: int


class ResetResponse(BaseModel):
    """Response model for a session reset.

    Attributes:
        message: Human-readable result.
        summary: Size of the reseeded tree.
    """

    message: str
    summary: str


# Route Handlers


@router.post("/execute", response_model=ExecuteResponse)
async def execute_command(request: ExecuteRequest, session: TerminalSessionDep):
    """Execute one command line.

    Command failures are part of the output text and never produce an error
    status.

    Args:
        request: The command line and optional working directory.
        session: The TerminalSession instance (injected by FastAPI).

    Returns:
        The output, the resulting working directory and the clear flag.
    """
    current_directory = None
    if request.current_directory is not None:
        current_directory = normalize_browser_path(request.current_directory)

    result = session.execute(request.command, current_directory=current_directory)
    return ExecuteResponse(
        output=result.boundary_output,
        new_directory=result.new_directory,
        clear=result.clear_screen,
    )


@router.get("/state", response_model=TerminalStateResponse)
async def get_terminal_state(session: TerminalSessionDep):
    """Get a snapshot of the session and its tree.

    Args:
        session: The TerminalSession instance (injected by FastAPI).

    Returns:
        Working directory, tree counts, history length and validation issues.
    """
    return TerminalStateResponse(**session.get_snapshot())


@router.get("/history", response_model=HistoryResponse)
async def get_history(session: TerminalSessionDep):
    """Get the executed command lines, oldest first."""
    entries = [
        HistoryEntryResponse(
            command=entry.command,
            directory=entry.directory,
            output=entry.output,
        )
        for entry in session.history
    ]
    return HistoryResponse(entries=entries, count=len(entries))


@router.post("/reset", response_model=ResetResponse)
async def reset_terminal(session: TerminalSessionDep):
    """Restore the seed tree and clear the working directory and history.

    Args:
        session: The TerminalSession instance (injected by FastAPI).

    Returns:
        Confirmation with the size of the reseeded tree.
    """
    session.reset()
    return ResetResponse(
        message="Terminal session reset",
        summary=session.filesystem.summary,
    )
