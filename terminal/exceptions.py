"""Exceptions raised by the terminal core.

Shell commands never raise these to their caller: user errors are rendered as
text lines. They are used by the programmatic surface (file browser reads,
directory listings) where a missing path is an error rather than output.
"""


class TerminalError(Exception):
    """Base class for all terminal core errors."""


class FileNotFoundInTreeError(TerminalError):
    """Raised when a file path does not exist in the virtual tree.

    Args:
        path: The canonical path that was requested.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File '{path}' not found")


class NotADirectoryInTreeError(TerminalError):
    """Raised when a directory listing is requested for a missing directory.

    Args:
        path: The canonical path that was requested.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Directory '{path}' not found")
