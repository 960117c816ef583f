"""Main entry point for the Virtual Terminal Simulator (VTS) FastAPI application.

This module creates and configures the FastAPI app instance that serves the REST API
for a simulated developer shell over an in-memory project tree.

To run the development server:
    uv run uvicorn main:app --reload

To run in production:
    uv run uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_terminal_session, shutdown_terminal_session
from api.exceptions import (
    directory_not_found_handler,
    file_not_found_handler,
    generic_exception_handler,
    runtime_error_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.routes import files as files_routes
from api.routes import terminal as terminal_routes
from terminal.exceptions import FileNotFoundInTreeError, NotADirectoryInTreeError

load_dotenv()

logging.basicConfig(
    level=os.environ.get("VTS_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    This context manager runs code at startup (before yield) and shutdown (after yield).

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    logger.info("Starting VTS - initializing TerminalSession")
    initialize_terminal_session()

    yield  # App runs and handles requests here

    logger.info("Shutting down VTS")
    shutdown_terminal_session()


# Create the FastAPI application instance
app = FastAPI(
    title="Virtual Terminal Simulator (VTS)",
    description="API for a simulated developer shell over an in-memory project tree",
    version="0.1.0",
    lifespan=lifespan,
)

# Register exception handlers
# Order matters: specific exceptions before general ones
app.add_exception_handler(FileNotFoundInTreeError, file_not_found_handler)
app.add_exception_handler(NotADirectoryInTreeError, directory_not_found_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(RuntimeError, runtime_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Register route modules
app.include_router(terminal_routes.router)
app.include_router(files_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message.

    Returns:
        A dictionary with a welcome message.
    """
    return {
        "message": "Welcome to the Virtual Terminal Simulator API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring.

    Returns:
        A dictionary indicating the service is healthy.
    """
    return {"status": "healthy"}
