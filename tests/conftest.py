import pytest
from fastapi.testclient import TestClient

from gestao_chevals.api import limiter
from gestao_chevals.backend import MOCK_CREDENTIALS, MockBackend, MockDatabase
from gestao_chevals.core.config import Settings
from gestao_chevals.main import app
from gestao_chevals.stores import SessionRegistry


@pytest.fixture
def db():
    return MockDatabase.with_demo_data()


@pytest.fixture
def backend(db):
    return MockBackend(db)


@pytest.fixture
async def logged_backend(backend):
    await backend.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])
    return backend


@pytest.fixture
def mock_settings():
    return Settings(MOCK_MODE=True, MOCK_LATENCY_MS=0, AUTH_SETTLE_DELAY_MS=0)


@pytest.fixture
def client(db, mock_settings):
    limiter.enabled = False
    app.state.sessions = SessionRegistry(mock_settings, database=db)
    with TestClient(app) as c:
        yield c
    app.state.sessions = None
    limiter.enabled = True


@pytest.fixture
def auth_headers(client):
    response = client.post("/api/auth/login", json=MOCK_CREDENTIALS)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
