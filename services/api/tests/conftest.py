"""Shared fixtures for the API service tests."""

import pytest
from fastapi.testclient import TestClient

from services.api.app.main import create_app
from services.api.app.settings import Settings


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient that returns 500 responses instead of re-raising handler errors."""
    return TestClient(app, raise_server_exceptions=False)
