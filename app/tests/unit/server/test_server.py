"""Unit tests for server.server module."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.clients.ip_api import IpApiClient
from infrastructure.configuration import VisitorConfig
from infrastructure.logging.context import CORRELATION_ID_HEADER
from infrastructure.services.providers import get_ip_api_client
from server import server


@pytest.mark.unit
def test_handler_is_fastapi_app():
    """Test that handler is a properly initialized FastAPI app."""
    assert server.handler is not None
    assert hasattr(server.handler, "routes")
    assert hasattr(server.handler, "user_middleware")
    assert hasattr(server.handler, "dependency_overrides")


@pytest.mark.unit
def test_request_context_middleware_configured():
    """Test that the correlation id middleware is installed."""
    middleware_classes = [m.cls.__name__ for m in server.handler.user_middleware]
    assert "RequestContextMiddleware" in middleware_classes


@pytest.mark.unit
def test_api_routes_included():
    """Test that the visitor and system routes are mounted."""
    route_paths = {str(route.path) for route in server.handler.routes}
    assert {"/", "/logs", "/health", "/version"} <= route_paths


@pytest.mark.unit
def test_rate_limiter_attached():
    """Test that the slowapi limiter is on the app state."""
    assert server.handler.state.limiter is not None


@pytest.mark.unit
def test_lifespan_initializes_state(isolated_cwd):
    """Test that startup wires the geolocation client and visitor config."""
    with TestClient(server.handler) as client:
        state = client.app.state
        assert isinstance(state.ip_api_client, IpApiClient)
        assert isinstance(state.visitor_config, VisitorConfig)
        assert state.visitor_config.log_path == isolated_cwd / "visitors.log"
        assert state.settings is not None


@pytest.mark.unit
def test_correlation_id_generated(isolated_cwd):
    """Test that a correlation id is returned when none is sent."""
    with TestClient(server.handler) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers[CORRELATION_ID_HEADER]


@pytest.mark.unit
def test_correlation_id_propagated(isolated_cwd):
    """Test that an incoming correlation id is echoed back."""
    with TestClient(server.handler) as client:
        response = client.get("/health", headers={CORRELATION_ID_HEADER: "req-42"})

    assert response.headers[CORRELATION_ID_HEADER] == "req-42"


@pytest.mark.unit
def test_visit_end_to_end(isolated_cwd, echo_ip_api):
    """Test a visit through the full app writes the log and redirects."""
    server.handler.dependency_overrides[get_ip_api_client] = lambda: echo_ip_api
    try:
        with TestClient(server.handler, follow_redirects=False) as client:
            visit = client.get("/", headers={"X-Forwarded-For": "36.68.0.1"})
            logs = client.get("/logs")
    finally:
        server.handler.dependency_overrides.clear()

    assert visit.status_code == 302
    assert logs.status_code == 200
    assert "IP: 36.68.0.1 | Organization: PT Telkom Indonesia" in logs.text
    assert (isolated_cwd / "visitors.log").exists()
