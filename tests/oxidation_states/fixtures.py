"""
Fixtures specific to oxidation state relay testing.

This module provides fixtures for mocking Materials Project API
responses and creating relay handlers for tests.
"""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient
from tests.base.mock_api import (
    MockResponse,
    create_search_body,
    SAMPLE_DOCS,
)
from backend.app.routes import app, get_api_key
from backend.handlers.oxidation_states import OxidationStateHandler


@pytest.fixture
def chromium_trioxide_doc():
    """Fixture for the CrO3 oxidation states document."""
    return SAMPLE_DOCS["chromium_trioxide"]


@pytest.fixture
def search_body(chromium_trioxide_doc):
    """Fixture for a successful upstream search body."""
    return create_search_body([chromium_trioxide_doc])


@pytest.fixture
def handler(api_key):
    """Fixture providing a handler with a configured API key."""
    return OxidationStateHandler(api_key=api_key)


@pytest.fixture
def mock_get():
    """Fixture patching the outbound ``requests.get`` used by the relay."""
    with patch("backend.handlers.oxidation_states.relay_handler.requests.get") as mocked:
        yield mocked


@pytest.fixture
def client(api_key):
    """Fixture providing a TestClient with the API key dependency overridden."""
    app.dependency_overrides[get_api_key] = lambda: api_key
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_without_key():
    """Fixture providing a TestClient with no API key configured."""
    app.dependency_overrides[get_api_key] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


__all__ = [
    "MockResponse",
    "chromium_trioxide_doc",
    "search_body",
    "handler",
    "mock_get",
    "client",
    "client_without_key",
]
