# tests/api/test_health_api.py
import pytest
from fastapi.testclient import TestClient

from main import app
from core.catalog_engine import InMemoryProductStore
from core.db import get_product_store


class UnreachableStore(InMemoryProductStore):
    async def ping(self):
        raise ConnectionError("unable to open database file")


@pytest.fixture
def client_for():
    def _client(store):
        app.dependency_overrides[get_product_store] = lambda: store
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_health_connected(client_for):
    response = client_for(InMemoryProductStore()).get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["environment"] == "test"
    assert "timestamp" in body
    assert "error" not in body


def test_health_disconnected(client_for):
    response = client_for(UnreachableStore()).get("/api/health")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "unhealthy"
    assert body["database"] == "disconnected"
    assert body["error"] == "unable to open database file"


def test_health_against_real_database():
    """No override: probes the SQLite database configured for the test session"""
    response = TestClient(app).get("/api/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"
