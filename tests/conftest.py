"""
Pytest configuration and shared fixtures.

Settings are cached on first import, so the cache is cleared before any
app module is imported to pick up env vars set for the test run.
"""

import pytest
from fastapi.testclient import TestClient

from message_board.config import get_settings
get_settings.cache_clear()

from message_board.main import app  # noqa: E402
from message_board.storage import MessageStore  # noqa: E402


@pytest.fixture
def store():
    """A fresh, empty message store."""
    return MessageStore()


@pytest.fixture(scope="function")
def client():
    """Test client whose lifespan gives each test its own empty store."""
    with TestClient(app) as test_client:
        yield test_client
