"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the shared TerminalSession.
"""

import logging
from typing import Annotated

from fastapi import Depends

from terminal.environment import TerminalEnvironment
from terminal.seed import create_seed_filesystem
from terminal.session import TerminalSession

logger = logging.getLogger(__name__)


# Global state
# One terminal session per process; the terminal and the file browser both
# read and mutate its tree.
_terminal_session: TerminalSession | None = None


def get_terminal_session() -> TerminalSession:
    """Get the shared TerminalSession instance.

    This function is a FastAPI dependency. When you add it to a route handler's
    parameters, FastAPI will automatically call this function and inject the result.

    Returns:
        The shared TerminalSession instance.

    Raises:
        RuntimeError: If the session hasn't been initialized yet.

    Example:
        @router.post("/some-endpoint")
        async def my_handler(session: TerminalSessionDep):
            result = session.execute("ls")
            return {"output": result.output}
    """
    if _terminal_session is None:
        raise RuntimeError(
            "TerminalSession not initialized. Call initialize_terminal_session() first."
        )

    return _terminal_session


def initialize_terminal_session() -> TerminalSession:
    """Initialize the shared TerminalSession instance.

    This should be called once when the FastAPI app starts up. Creates a new
    session over a freshly seeded tree, with the environment read from
    VTS_* environment variables.

    Returns:
        The newly created TerminalSession instance.
    """
    global _terminal_session

    _terminal_session = TerminalSession(
        filesystem=create_seed_filesystem(),
        environment=TerminalEnvironment(),
    )
    logger.info(
        f"Terminal session {_terminal_session.session_id} initialized "
        f"({_terminal_session.filesystem.summary})"
    )
    return _terminal_session


def shutdown_terminal_session() -> None:
    """Drop the shared TerminalSession.

    This should be called when the FastAPI app shuts down. The tree lives only
    in memory, so nothing is saved.
    """
    global _terminal_session

    if _terminal_session is not None:
        logger.info(f"Terminal session {_terminal_session.session_id} closed")
    _terminal_session = None


# Type alias for dependency injection
# This makes the type annotation cleaner in route handlers
TerminalSessionDep = Annotated[TerminalSession, Depends(get_terminal_session)]
