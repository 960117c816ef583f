"""Test fixtures for VTS.

- terminal: factories and fixtures for trees, environments and sessions
- api: FastAPI TestClient fixtures with the session dependency overridden
"""
