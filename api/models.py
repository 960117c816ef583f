"""Shared request and response models for API endpoints.

This module contains models used by both the terminal and the file browser
route handlers.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class FileEntryResponse(BaseModel):
    """A single entry in a directory listing.

    Attributes:
        name: Last path segment of the entry.
        type: "folder" for directories, "file" for files.
        path: Canonical path of the entry (no leading slash).
    """

    name: str
    type: Literal["file", "folder"]
    path: str


class HistoryEntryResponse(BaseModel):
    """One executed command line.

    Attributes:
        command: The command line as executed.
        directory: Working directory the command ran in.
        output: Output shown to the user.
    """

    command: str
    directory: str
    output: str


# Error response models


class ErrorResponse(BaseModel):
    """Standard error response model.

    Attributes:
        error: Error type or code.
        detail: Human-readable error message.
        path: Path involved in the error, if any.
    """

    error: str
    detail: str
    path: str | None = Field(default=None, description="Tree path the error refers to")
    validation_errors: list[dict[str, Any]] | None = None
