import pytest

from timestamp_service.factory import create_app
from timestamp_service.store import InMemoryTimestampStore


class StubTimestampStore:
    """Records every stored timestamp."""

    def __init__(self, timestamp=None):
        self.timestamp = timestamp
        self.store_calls = []

    def get(self):
        return 0 if self.timestamp is None else self.timestamp

    def set(self, timestamp):
        self.timestamp = timestamp
        self.store_calls.append(timestamp)


@pytest.fixture
def store():
    """A fresh, empty in-memory store."""
    return InMemoryTimestampStore()


@pytest.fixture
def app(store):
    """Create a test Flask application around the shared store."""
    test_app = create_app(store=store, config_overrides={'TESTING': True})
    yield test_app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()
