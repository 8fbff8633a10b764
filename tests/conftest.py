"""Shared pytest fixtures for Calc Service tests."""

import pytest
from fastapi.testclient import TestClient

from calc_service.api import app


@pytest.fixture
def client() -> TestClient:
    """Return a test client for the API."""
    return TestClient(app, raise_server_exceptions=False)
