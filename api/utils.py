"""Utility functions for API route handlers."""

from api.models import FileEntryResponse
from terminal.filesystem import FileEntry


def normalize_browser_path(path: str | None) -> str:
    """Turn a path as sent by a browser client into a canonical tree path.

    Browser clients may send "/", "/src/" or "src"; the tree stores "" and
    "src".

    Args:
        path: The raw query parameter value (None means the root).

    Returns:
        The canonical path with no leading or trailing slash.
    """
    if not path:
        return ""
    return path.strip().strip("/")


def to_entry_responses(entries: list[FileEntry]) -> list[FileEntryResponse]:
    """Convert tree entries into response models.

    Args:
        entries: Entries returned by the terminal session.

    Returns:
        List of FileEntryResponse in the same order.
    """
    return [
        FileEntryResponse(name=entry.name, type=entry.type, path=entry.path)
        for entry in entries
    ]
