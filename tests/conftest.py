"""Shared fixtures for the greeting API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app


@pytest.fixture()
def app():
    """Return a fresh application instance."""

    return create_app(Settings(_env_file=None))


@pytest.fixture()
def client(app):
    """Return a test client bound to a clean application instance."""

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def public_client():
    """Client for an app configured with an externally visible base URL."""

    app = create_app(Settings(_env_file=None, PUBLIC_BASE_URL="https://api.example.com/v1/"))
    with TestClient(app) as test_client:
        yield test_client
