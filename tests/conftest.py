import sys
from pathlib import Path
import os

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so `import app` works when running pytest from root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Never touch a real Firebase project from tests
os.environ["STORE_BACKEND"] = "memory"
os.environ["ENV"] = "development"

from app.core.config import Settings  # noqa: E402
from app.core.container import wire_container  # noqa: E402
from app.main import create_app  # noqa: E402
from app.transactions.store.memory_store import InMemoryTransactionStore  # noqa: E402
from tests.fakes import RecordingSender  # noqa: E402


@pytest.fixture
def store():
    return InMemoryTransactionStore()


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def make_client(store, sender):
    """Factory returning a TestClient for the given settings overrides."""
    clients = []

    def _make(store=store, sender=sender, **overrides) -> TestClient:
        settings = Settings(STORE_BACKEND="memory", **overrides)
        container = wire_container(settings, store, sender)
        client = TestClient(create_app(container))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
