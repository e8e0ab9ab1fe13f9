import pytest
from fastapi.testclient import TestClient

from api.routes.system import router as system_router
from infrastructure.configuration import Settings
from infrastructure.services.providers import get_settings
from utils.tests import create_test_app


@pytest.fixture
def client():
    app = create_test_app(system_router)
    return TestClient(app)


def test_get_version_unknown(client):
    client.app.dependency_overrides[get_settings] = lambda: Settings(GIT_SHA="Unknown")
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "Unknown"}


def test_get_version_known(client):
    client.app.dependency_overrides[get_settings] = lambda: Settings(GIT_SHA="foo")
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "foo"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["content-type"].startswith("text/plain")


def test_health_is_not_rate_limited(client):
    for _ in range(120):
        response = client.get("/health")
        assert response.status_code == 200
