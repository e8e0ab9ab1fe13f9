"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.ip_api import IpApiSettings

__all__ = [
    "IpApiSettings",
]
