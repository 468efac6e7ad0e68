"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from inkpath.capture import CaptureConfig, DrawingSession
from inkpath.config import settings
from inkpath.main import app
from inkpath.models import CanvasSize
from inkpath.services.registry import registry


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts with no live sessions."""
    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    original_api_keys = settings.api_keys

    # Set test configuration
    settings.api_keys = "test_key_123,test_key_456"

    yield settings

    # Restore original settings
    settings.api_keys = original_api_keys


@pytest.fixture
def client(test_settings):
    """Create a test client."""
    return TestClient(app)


@pytest.fixture
def api_key():
    """Valid API key for testing."""
    return "test_key_123"


@pytest.fixture
def headers(api_key):
    """Request headers with valid API key."""
    return {"X-API-Key": api_key}


@pytest.fixture
def session():
    """A capture session on a 1000x1000 surface with default cleanup."""
    return DrawingSession(
        canvas_size=CanvasSize(w=1000, h=1000),
        user_id="user_1",
        config=CaptureConfig(),
        start_time=0,
    )
