"""Terminal session: the single entry point into the terminal core.

A TerminalSession owns one virtual tree, the working directory pointer into
it, the command history, and the registry of command handlers. Every command
line goes through execute(), which parses it, dispatches it to a handler,
applies output redirection and records the result.
"""

import logging
import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr

from terminal.commands import CommandContext, CommandRegistry, build_default_registry
from terminal.environment import TerminalEnvironment
from terminal.filesystem import FileEntry, VirtualFileSystem
from terminal.parser import CommandInvocation, parse_command_line
from terminal.paths import join_path, parent_path, resolve_path
from terminal.result import CommandResult, ExecutionResult
from terminal.seed import RECENT_FILES, create_seed_filesystem

logger = logging.getLogger(__name__)


class HistoryEntry(BaseModel):
    """One executed command line.

    Args:
        command: The trimmed command line.
        directory: Working directory the command ran in.
        output: Output shown to the user (after redirection).
    """

    command: str
    directory: str
    output: str


class TerminalSession(BaseModel):
    """A single-user shell session over an in-memory tree.

    Sessions never share a tree: each one is created with its own
    VirtualFileSystem (the seed project by default). Commands run one at a
    time and complete before execute() returns.

    Attributes:
        filesystem: The tree store this session mutates.
        environment: User name, clock and random source for commands.
        current_directory: Canonical working directory ("" = root).
        history: Executed command lines, oldest first.
        max_history: Maximum number of history entries kept.
        session_id: Unique identifier for this session.
    """

    filesystem: VirtualFileSystem = Field(default_factory=create_seed_filesystem)
    environment: TerminalEnvironment = Field(default_factory=TerminalEnvironment)
    current_directory: str = ""
    history: list[HistoryEntry] = Field(default_factory=list)
    max_history: int = Field(default=1000, ge=1)
    session_id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    _registry: CommandRegistry = PrivateAttr(default_factory=build_default_registry)

    @property
    def registry(self) -> CommandRegistry:
        """Command registry used by dispatch(); extra commands may be registered."""
        return self._registry

    # ===== Command execution =====

    def execute(self, command_line: str, current_directory: Optional[str] = None) -> ExecutionResult:
        """Execute one command line.

        Args:
            command_line: The raw line as typed.
            current_directory: Working directory to run in. Defaults to the
                session's own current directory.

        Returns:
            ExecutionResult with the output, the resulting working directory
            and the clear-screen flag.
        """
        cwd = self.current_directory if current_directory is None else current_directory
        invocation = parse_command_line(command_line)
        logger.debug(f"Executing {invocation.raw!r} in /{cwd}")

        result = self.dispatch(invocation, cwd)
        new_directory = cwd if result.new_directory is None else result.new_directory
        self.current_directory = new_directory

        if result.clear_screen:
            self.history.clear()
            return ExecutionResult(new_directory=new_directory, clear_screen=True)

        output = result.output
        if invocation.redirects and output:
            output = self._redirect(invocation, output, cwd)

        if invocation.raw:
            self._record(HistoryEntry(command=invocation.raw, directory=cwd, output=output))

        return ExecutionResult(output=output, new_directory=new_directory)

    def dispatch(self, invocation: CommandInvocation, cwd: str) -> CommandResult:
        """Run the handler registered for the invocation's command name.

        Unexpected exceptions from a handler are logged and turned into a
        single `Error: <message>` line; the session stays usable.

        Args:
            invocation: The parsed command line.
            cwd: Working directory for the command.

        Returns:
            The handler's CommandResult.
        """
        name = invocation.name
        if not name:
            return CommandResult()

        handler = self._registry.get(name)
        if handler is None:
            return self._unknown_command(name, cwd)

        try:
            context = CommandContext(
                name=name,
                args=invocation.args,
                cwd=cwd,
                filesystem=self.filesystem,
                environment=self.environment,
                history=[entry.command for entry in self.history] + [invocation.raw],
                commands=self._registry.summaries(),
            )
            return handler(context)
        except Exception as e:
            logger.exception(f"Command '{name}' failed")
            return CommandResult.text(f"Error: {e}")

    def _unknown_command(self, name: str, cwd: str) -> CommandResult:
        if self.filesystem.file_exists(join_path(cwd, name)):
            return CommandResult.text(f"Simulated execution of {name}")
        return CommandResult.text(
            f"Command not found: {name}\nType 'help' to see available commands."
        )

    def _redirect(self, invocation: CommandInvocation, output: str, cwd: str) -> str:
        """Write command output to the redirection target.

        Returns:
            The output left to show: empty once written, or an error line when
            the target's parent directory is missing.
        """
        target = invocation.redirect_target or ""
        try:
            path = resolve_path(target, cwd)
            parent = parent_path(path)
            if parent and not self.filesystem.directory_exists(parent):
                return f"{invocation.name}: cannot create {target}: No such file or directory"

            content = output
            if invocation.append and self.filesystem.file_exists(path):
                content = self.filesystem.read_file(path) + "\n" + output

            if not self.filesystem.write_file(path, content):
                # output is consumed even when the target cannot be written
                logger.warning(f"Redirection to {target!r} was not written")
            return ""
        except Exception as e:
            logger.exception(f"Redirection to {target!r} failed")
            return f"Error redirecting output: {e}"

    def _record(self, entry: HistoryEntry) -> None:
        self.history.append(entry)
        if len(self.history) > self.max_history:
            del self.history[: len(self.history) - self.max_history]

    # ===== File browser access =====

    def list_files(self, path: str = "") -> list[FileEntry]:
        """List the direct children of a directory for the file browser.

        Raises:
            NotADirectoryInTreeError: If the directory does not exist.
        """
        return self.filesystem.list_entries(path)

    def read_file(self, path: str) -> str:
        """Read a file for the file browser.

        Raises:
            FileNotFoundInTreeError: If the file does not exist.
        """
        return self.filesystem.read_file(path)

    def get_recent_files(self) -> list[FileEntry]:
        """Fixed list of recently edited files; not tied to the live tree."""
        return [entry.model_copy() for entry in RECENT_FILES]

    # ===== Lifecycle =====

    def reset(self) -> None:
        """Restore the seed tree and clear the working directory and history."""
        self.filesystem = create_seed_filesystem()
        self.current_directory = ""
        self.history.clear()
        logger.info(f"Terminal session {self.session_id} reset to seed tree")

    def validate(self) -> list[str]:
        """Validate the tree and return any invariant violations."""
        return self.filesystem.validate_state()

    def get_snapshot(self) -> dict[str, Any]:
        """Return a summary of the session for API responses."""
        return {
            "session_id": self.session_id,
            "current_directory": self.current_directory,
            "directory_count": len(self.filesystem.directories),
            "file_count": len(self.filesystem.files),
            "history_length": len(self.history),
            "summary": self.filesystem.summary,
            "validation_errors": self.validate(),
        }
