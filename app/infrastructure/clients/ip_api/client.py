"""ip-api.com client for geolocation lookups.

Queries the free ip-api.com JSON endpoint for the organization and country
behind an IP address. Every outcome is returned as an OperationResult; the
client never raises to its caller. No retries, no caching, and no timeout
beyond the httpx transport default.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
from urllib.parse import quote

import httpx
import structlog

from infrastructure.operations import (
    OperationResult,
    OperationStatus,
    classify_http_error,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

UNKNOWN = "Unknown"
LOOKUP_FIELDS = "status,country,org,query"


@dataclass
class IpApiLookup:
    """Resolved geolocation data for an IP address."""

    ip: str
    org: str = UNKNOWN
    country: str = UNKNOWN

    def to_dict(self) -> dict:
        """Convert to dictionary format."""
        return {"ip": self.ip, "org": self.org, "country": self.country}


class IpApiClient:
    """Client for ip-api.com lookups.

    All methods return OperationResult for consistent error handling.

    Args:
        base_url: Base URL of the service, e.g. ``http://ip-api.com``
        http_client: Shared httpx.AsyncClient; its lifecycle belongs to the caller
    """

    def __init__(self, base_url: str, http_client: httpx.AsyncClient) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http_client
        self._logger = logger.bind(component="ip_api_client")

    @classmethod
    def from_settings(
        cls, settings: "Settings", http_client: httpx.AsyncClient
    ) -> "IpApiClient":
        """Build a client from settings.ip_api.IP_API_BASE_URL."""
        return cls(base_url=settings.ip_api.IP_API_BASE_URL, http_client=http_client)

    def lookup_url(self, ip_address: str) -> str:
        """URL queried for ``ip_address``."""
        path = quote(ip_address, safe=":")
        return f"{self._base_url}/json/{path}?fields={LOOKUP_FIELDS}"

    async def geolocate(self, ip_address: str) -> OperationResult:
        """Look up organization and country for an IP address.

        Args:
            ip_address: IPv4 or IPv6 address as seen by the server

        Returns:
            OperationResult with IpApiLookup data as a dict on success, or an
            error status describing why the provider gave no answer
        """
        log = self._logger.bind(ip_address=ip_address)
        log.debug("geolocating_ip")

        try:
            response = await self._http.get(self.lookup_url(ip_address))
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            log.warning("ip_api_http_error", error=str(e))
            return classify_http_error(e)
        except ValueError as e:
            log.warning("ip_api_malformed_response", error=str(e))
            return OperationResult.permanent_error(
                message=f"Malformed response from ip-api: {str(e)}",
                error_code="MALFORMED_RESPONSE",
            )
        except Exception as e:
            log.exception("unexpected_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Unexpected error during geolocation: {str(e)}",
                error_code="UNEXPECTED_ERROR",
            )

        if not isinstance(payload, dict):
            log.warning(
                "ip_api_malformed_response", payload_type=type(payload).__name__
            )
            return OperationResult.permanent_error(
                message="Malformed response from ip-api: expected a JSON object",
                error_code="MALFORMED_RESPONSE",
            )

        if payload.get("status") != "success":
            reason: Optional[str] = payload.get("message") or "unknown reason"
            log.info("ip_api_lookup_failed", reason=reason)
            return OperationResult.error(
                OperationStatus.NOT_FOUND,
                message=f"ip-api could not resolve {ip_address}: {reason}",
                error_code="LOOKUP_FAILED",
            )

        lookup = IpApiLookup(
            ip=payload.get("query") or ip_address,
            org=payload.get("org") or UNKNOWN,
            country=payload.get("country") or UNKNOWN,
        )
        log.debug("geolocation_success", org=lookup.org, country=lookup.country)
        return OperationResult.success(
            data=lookup.to_dict(), message="IP geolocated successfully"
        )
