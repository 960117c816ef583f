"""Command registry and the uniform handler contract.

Every command is a plain function taking a CommandContext and returning a
CommandResult. Handlers are registered by name in a CommandRegistry; the
session looks the lower-cased command name up there.
"""

from typing import Callable, Optional

from pydantic import BaseModel, Field

from terminal.environment import TerminalEnvironment
from terminal.filesystem import VirtualFileSystem
from terminal.paths import resolve_path
from terminal.result import CommandResult


class CommandContext(BaseModel):
    """Everything a handler may read or mutate.

    Args:
        name: Lower-cased command name.
        args: Tokens after the command name.
        cwd: Current working directory (canonical).
        filesystem: The session's tree store.
        environment: The session's environment (user, clock, random source).
        history: Command lines executed before this one, oldest first.
        commands: Registered command names mapped to their one-line summaries.
    """

    name: str
    args: list[str]
    cwd: str
    filesystem: VirtualFileSystem
    environment: TerminalEnvironment
    history: list[str] = Field(default_factory=list)
    commands: dict[str, str] = Field(default_factory=dict)

    class Config:
        """Pydantic configuration."""

        arbitrary_types_allowed = True

    def resolve(self, token: str) -> str:
        """Resolve a path argument against the working directory."""
        return resolve_path(token, self.cwd)

    def has_flag(self, *flags: str) -> bool:
        """Check whether any of the given flags was passed verbatim."""
        return any(flag in self.args for flag in flags)

    @property
    def operands(self) -> list[str]:
        """Arguments that are not option flags."""
        return [arg for arg in self.args if not arg.startswith("-")]


CommandHandler = Callable[[CommandContext], CommandResult]


class CommandRegistry:
    """Maps command names to handlers.

    Example:
        registry = CommandRegistry()

        @registry.command("pwd", summary="Print working directory")
        def pwd(ctx: CommandContext) -> CommandResult:
            return CommandResult.text("/" + ctx.cwd)
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._summaries: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, summary: str = "") -> None:
        """Register a handler under a command name.

        Args:
            name: Command name as typed (case-insensitive).
            handler: The handler function.
            summary: One-line description.

        Raises:
            ValueError: If the name is empty or already registered.
        """
        key = name.lower()
        if not key:
            raise ValueError("Command name cannot be empty")
        if key in self._handlers:
            raise ValueError(f"Command '{key}' is already registered")
        self._handlers[key] = handler
        self._summaries[key] = summary

    def command(self, name: str, summary: str = "") -> Callable[[CommandHandler], CommandHandler]:
        """Decorator form of register()."""

        def decorator(handler: CommandHandler) -> CommandHandler:
            self.register(name, handler, summary)
            return handler

        return decorator

    def get(self, name: str) -> Optional[CommandHandler]:
        """Look up a handler by name, or None if unknown."""
        return self._handlers.get(name.lower())

    def summary(self, name: str) -> str:
        """One-line description of a command (empty if none)."""
        return self._summaries.get(name.lower(), "")

    @property
    def names(self) -> list[str]:
        """Registered command names, sorted."""
        return sorted(self._handlers)

    def summaries(self) -> dict[str, str]:
        """Every registered command with its summary, sorted by name."""
        return {name: self._summaries[name] for name in self.names}

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
