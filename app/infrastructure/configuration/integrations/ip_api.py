"""ip-api.com integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class IpApiSettings(IntegrationSettings):
    """ip-api.com geolocation service configuration.

    Environment Variables:
        IP_API_BASE_URL: Base URL of the lookup service (default: http://ip-api.com)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        base_url = settings.ip_api.IP_API_BASE_URL
        ```
    """

    IP_API_BASE_URL: str = Field(default="http://ip-api.com", alias="IP_API_BASE_URL")
