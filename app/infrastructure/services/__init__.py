"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    VisitorConfigDep,
    IpApiClientDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_visitor_config,
    get_ip_api_client,
)

__all__ = [
    "SettingsDep",
    "VisitorConfigDep",
    "IpApiClientDep",
    "get_settings",
    "get_visitor_config",
    "get_ip_api_client",
]
