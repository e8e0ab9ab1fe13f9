"""ip-api.com geolocation client for infrastructure layer.

Public API (Package Level):
- IpApiClient: Async client for the ip-api.com JSON endpoint
- IpApiLookup: Dataclass for lookup results
- UNKNOWN: Placeholder for fields the provider did not resolve

Note: Application code should import from infrastructure.services, not directly from this package.

Developer Usage (Recommended):
    from infrastructure.services import IpApiClientDep

    @router.get("/")
    async def visit(ip_api: IpApiClientDep):
        result = await ip_api.geolocate(ip_address="203.0.113.7")
        if result.is_success:
            return result.data
"""

from infrastructure.clients.ip_api.client import UNKNOWN, IpApiClient, IpApiLookup

__all__ = [
    "IpApiClient",
    "IpApiLookup",
    "UNKNOWN",
]
