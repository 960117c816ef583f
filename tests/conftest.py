"""Pytest configuration and shared fixtures."""

import pytest

# Load environment variables from .env file at test startup
from dotenv import load_dotenv
load_dotenv()

pytest_plugins = [
    "tests.fixtures.terminal",
    "tests.fixtures.api",
]


@pytest.fixture(autouse=True)
def clear_vts_environment(monkeypatch):
    """Keep VTS_* settings from a developer's .env out of the tests.

    Tests that exercise environment configuration set the variables they
    need with monkeypatch.
    """
    for name in ("VTS_USERNAME", "VTS_RANDOM_SEED"):
        monkeypatch.delenv(name, raising=False)
