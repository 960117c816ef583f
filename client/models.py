"""Client response models for the VTS API client.

This module re-exports the models shared with the API layer and defines
client-specific response models.
"""

from pydantic import BaseModel, Field

# Re-export common models from API layer for client convenience
from api.models import ErrorResponse, FileEntryResponse, HistoryEntryResponse

__all__ = [
    # Re-exported from api.models
    "ErrorResponse",
    "FileEntryResponse",
    "HistoryEntryResponse",
    # Client-specific models
    "HealthResponse",
    "WelcomeResponse",
]


class HealthResponse(BaseModel):
    """Response model for the API health check.

    Attributes:
        status: Health status ("healthy" when the server is up).
    """

    status: str = Field(..., description="Health status")


class WelcomeResponse(BaseModel):
    """Response model for the API root endpoint.

    Attributes:
        message: Welcome text.
        version: API version string.
        docs_url: Path of the interactive API docs.
    """

    message: str
    version: str
    docs_url: str
