"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.clients.ip_api import IpApiClient
from infrastructure.configuration import Settings, VisitorConfig
from infrastructure.services.providers import (
    get_ip_api_client,
    get_settings,
    get_visitor_config,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Immutable visitor tracking configuration (target URL, log path, tail size)
VisitorConfigDep = Annotated[VisitorConfig, Depends(get_visitor_config)]

# Geolocation client, one per application instance
IpApiClientDep = Annotated[IpApiClient, Depends(get_ip_api_client)]

__all__ = [
    "SettingsDep",
    "VisitorConfigDep",
    "IpApiClientDep",
]
