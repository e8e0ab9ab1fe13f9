"""Test fixtures for visitor route integration tests."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.services.providers import get_ip_api_client, get_visitor_config
from packages.visitors.routes import router as visitors_router
from utils.tests import create_test_app


@pytest.fixture
def make_app():
    """Build an app serving the visitor routes with the given collaborators."""

    def _make_app(config, ip_api):
        return create_test_app(
            visitors_router,
            dependency_overrides={
                get_visitor_config: lambda: config,
                get_ip_api_client: lambda: ip_api,
            },
        )

    return _make_app


@pytest.fixture
def app(make_app, visitor_config, echo_ip_api):
    """Visitor app writing to a temporary log with a working lookup."""
    return make_app(visitor_config, echo_ip_api)


@pytest.fixture
def client(app):
    """Create test client that does not follow redirects."""
    with TestClient(app, follow_redirects=False) as client:
        yield client
