import os
import tempfile

# cheap hashes and a throwaway session file before the package reads its config
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SESSION_FILE", os.path.join(tempfile.gettempdir(), "inventory_sentinel_test_session.json"))

import pytest
from fastapi.testclient import TestClient

from inventory_sentinel.auth import AuthGate, SessionStorage
from inventory_sentinel.database import create_stores, get_auth_gate, get_stores
from inventory_sentinel.main import app


@pytest.fixture
def stores():
    return create_stores(bcrypt_rounds=4)


@pytest.fixture
def empty_stores():
    return create_stores(seeded=False)


@pytest.fixture
def storage(tmp_path):
    return SessionStorage(tmp_path / "session.json")


@pytest.fixture
def gate(stores, storage):
    return AuthGate(stores.users, storage)


@pytest.fixture
def anon_client(stores, gate):
    app.dependency_overrides[get_stores] = lambda: stores
    app.dependency_overrides[get_auth_gate] = lambda: gate
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client(anon_client):
    r = anon_client.post("/api/auth/login", json={"email": "admin@admin.com", "password": "admin"})
    assert r.status_code == 200, r.text
    return anon_client
