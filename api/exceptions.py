"""Exception handlers for the VTS FastAPI application.

This module converts Python exceptions into consistent, user-friendly JSON
responses. Shell commands never raise: their failures are output text. These
handlers cover the file browser endpoints and unexpected server errors.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from terminal.exceptions import FileNotFoundInTreeError, NotADirectoryInTreeError

logger = logging.getLogger(__name__)


async def file_not_found_handler(request: Request, exc: FileNotFoundInTreeError):
    """Handle FileNotFoundInTreeError exceptions.

    Returns a 404 naming the path that was requested.

    Args:
        request: The incoming request that triggered the error.
        exc: The FileNotFoundInTreeError exception.

    Returns:
        JSONResponse with 404 status and the missing path.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "File Not Found",
            "detail": str(exc),
            "path": exc.path,
        },
    )


async def directory_not_found_handler(request: Request, exc: NotADirectoryInTreeError):
    """Handle NotADirectoryInTreeError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The NotADirectoryInTreeError exception.

    Returns:
        JSONResponse with 404 status and the missing path.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Directory Not Found",
            "detail": str(exc),
            "path": exc.path,
        },
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors raised outside request parsing.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with validation error details.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": exc.errors(),
        },
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValueError exception.

    Returns:
        JSONResponse with 400 status.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid Value",
            "detail": str(exc),
            "type": "ValueError",
        },
    )


async def runtime_error_handler(request: Request, exc: RuntimeError):
    """Handle RuntimeError exceptions (e.g. the session was never initialized).

    Args:
        request: The incoming request that triggered the error.
        exc: The RuntimeError exception.

    Returns:
        JSONResponse with 500 status.
    """
    logger.error(f"Runtime error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Runtime Error",
            "detail": str(exc),
            "type": "RuntimeError",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    Logs the traceback and returns a generic body so stack traces never reach
    the client.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with generic error message.
    """
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )
