"""Command and execution results.

Handlers return a CommandResult. The clear-screen request is a flag on the
result, not a magic output string; the `CLEAR_TERMINAL` literal only appears
when a result crosses the boundary to the UI (ExecutionResult.boundary_output).
"""

from typing import Optional

from pydantic import BaseModel, Field

CLEAR_TERMINAL = "CLEAR_TERMINAL"


class CommandResult(BaseModel):
    """Outcome of a single command handler.

    Args:
        output: Text to show the user (may be empty).
        new_directory: Working directory after the command, or None if unchanged.
        clear_screen: True when the caller should discard its display history.
    """

    output: str = ""
    new_directory: Optional[str] = None
    clear_screen: bool = False

    @classmethod
    def text(cls, output: str) -> "CommandResult":
        """Shorthand for a plain text result."""
        return cls(output=output)

    @classmethod
    def lines(cls, lines: list[str]) -> "CommandResult":
        """Shorthand for a result made of output lines."""
        return cls(output="\n".join(lines))

    @classmethod
    def clear(cls) -> "CommandResult":
        """Result asking the caller to clear its display."""
        return cls(clear_screen=True)


class ExecutionResult(BaseModel):
    """Result of executing a full command line in a session.

    Args:
        output: Text produced by the command, after redirection.
        new_directory: Working directory after the command.
        clear_screen: True when the caller should discard its display history.
    """

    output: str = Field(default="", description="Command output after redirection")
    new_directory: str = Field(default="", description="Working directory after the command")
    clear_screen: bool = Field(default=False, description="Clear the display history")

    @property
    def boundary_output(self) -> str:
        """Output in the form the UI expects, with the clear sentinel."""
        return CLEAR_TERMINAL if self.clear_screen else self.output
