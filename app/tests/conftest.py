from typing import Callable

import httpx
import pytest

from api.dependencies.rate_limits import get_limiter
from infrastructure.clients.ip_api import IpApiClient
from infrastructure.configuration import VisitorConfig
from infrastructure.logging.setup import configure_logging

# Silence structlog/stdlib output for the whole test run
configure_logging()

IP_API_TEST_URL = "http://ip-api.test"


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Start every test with empty rate limit counters.

    The slowapi limiter is a module-level singleton shared by every app
    instance created in the test run.
    """
    get_limiter().reset()
    yield


@pytest.fixture
def visitor_config(tmp_path) -> VisitorConfig:
    """Visitor config writing to a per-test log file."""
    return VisitorConfig(log_path=tmp_path / "visitors.log")


@pytest.fixture
def ip_api_client_factory() -> Callable[[Callable], IpApiClient]:
    """Build IpApiClient instances backed by an httpx.MockTransport handler.

    Example:
        def handler(request):
            return httpx.Response(200, json={"status": "success", ...})

        client = ip_api_client_factory(handler)
    """

    def _factory(handler: Callable) -> IpApiClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return IpApiClient(base_url=IP_API_TEST_URL, http_client=http_client)

    return _factory


@pytest.fixture
def echo_ip_api(ip_api_client_factory) -> IpApiClient:
    """ip-api stand-in that resolves every IP to a fixed org and country."""

    def handler(request: httpx.Request) -> httpx.Response:
        ip = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(
            200,
            json={
                "status": "success",
                "country": "Indonesia",
                "org": "PT Telkom Indonesia",
                "query": ip,
            },
        )

    return ip_api_client_factory(handler)


@pytest.fixture
def failing_ip_api(ip_api_client_factory) -> IpApiClient:
    """ip-api stand-in whose every request fails to connect."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return ip_api_client_factory(handler)
