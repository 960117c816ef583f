"""VTS terminal core package.

This package contains the in-memory virtual filesystem and the shell-command
interpreter built on top of it: path resolution, the tree store, the command
line parser, the command registry with its handlers, and the session that
ties them together.
"""

from terminal.exceptions import (
    FileNotFoundInTreeError,
    NotADirectoryInTreeError,
    TerminalError,
)
from terminal.filesystem import DirectoryListing, FileEntry, VirtualFileSystem
from terminal.parser import CommandInvocation, parse_command_line, tokenize
from terminal.result import CLEAR_TERMINAL, CommandResult, ExecutionResult
from terminal.environment import TerminalEnvironment
from terminal.session import HistoryEntry, TerminalSession

__all__ = [
    "TerminalError",
    "FileNotFoundInTreeError",
    "NotADirectoryInTreeError",
    "VirtualFileSystem",
    "DirectoryListing",
    "FileEntry",
    "CommandInvocation",
    "parse_command_line",
    "tokenize",
    "CLEAR_TERMINAL",
    "CommandResult",
    "ExecutionResult",
    "HistoryEntry",
    "TerminalEnvironment",
    "TerminalSession",
]
