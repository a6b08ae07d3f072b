"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from types import SimpleNamespace

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from financeflow.main import app
from financeflow.api.dependencies import get_store
from financeflow.ledger import FinanceStore


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def store():
    """Fresh store loaded with the demo data."""
    store = FinanceStore(budget=3000.0)
    store.seed_demo_data()
    return store


@pytest.fixture
def empty_store():
    """Store with no records."""
    return FinanceStore(budget=3000.0)


@pytest.fixture
def client(store):
    """Test client bound to the per-test store."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class FakeCompletions:
    """Stands in for client.chat.completions."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_fake_openai(content=None, error=None):
    """Build an object shaped like an OpenAI client."""
    completions = FakeCompletions(content=content, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def fake_openai():
    """Factory for fake OpenAI clients."""
    return make_fake_openai
