"""Visitor geolocation with guaranteed fallback.

Wraps the ip-api.com client so the visitor pipeline always gets an answer:
any failure degrades to ``Unknown`` organization and country.
"""

import structlog
from pydantic import BaseModel, Field

from infrastructure.clients.ip_api import UNKNOWN, IpApiClient

logger = structlog.get_logger()


class VisitorInfo(BaseModel):
    """What the visitor pipeline knows about an IP."""

    ip: str = Field(..., description="IP echoed by the provider, or the queried IP")
    org: str = Field(UNKNOWN, description="Organization name")
    country: str = Field(UNKNOWN, description="Country name")


async def lookup_visitor(ip_address: str, client: IpApiClient) -> VisitorInfo:
    """Geolocate ``ip_address``, never raising.

    Args:
        ip_address: IP resolved from the request
        client: ip-api.com client

    Returns:
        VisitorInfo with provider data on success, otherwise the original IP
        with ``Unknown`` organization and country
    """
    log = logger.bind(ip_address=ip_address, operation="lookup_visitor")
    fallback = {"ip": ip_address}

    try:
        result = await client.geolocate(ip_address=ip_address)
    except Exception as e:
        log.exception("geolocation_error", error=str(e))
        return VisitorInfo(**fallback)

    if not result.is_success:
        log.warning(
            "geolocation_failed",
            status=result.status.value,
            error_code=result.error_code,
            error=result.message,
        )

    return VisitorInfo(**result.unwrap_or(fallback))
