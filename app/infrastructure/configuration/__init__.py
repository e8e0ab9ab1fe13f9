"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization, plus the fixed visitor tracking configuration.

Exports:
    Settings: Main settings class
    IpApiSettings: Geolocation service settings class
    ServerSettings: HTTP server settings class
    VisitorConfig: Immutable visitor tracking configuration

Example:
    ```python
    from infrastructure.services import get_settings, get_visitor_config

    settings = get_settings()
    port = settings.server.PORT

    config = get_visitor_config()
    target = config.target_url
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import IpApiSettings
from infrastructure.configuration.infrastructure import ServerSettings
from infrastructure.configuration.visitors import VisitorConfig

__all__ = ["Settings", "IpApiSettings", "ServerSettings", "VisitorConfig"]
