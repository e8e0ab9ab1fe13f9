"""
Factory functions for dependency injection.

Provides application-scoped providers for core infrastructure services.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.clients.ip_api import IpApiClient
from infrastructure.configuration import Settings, VisitorConfig


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_visitor_config() -> VisitorConfig:
    """
    Get the visitor tracking configuration, built once per process.

    The log path is resolved against the working directory at the first
    call, which happens during application startup.

    Returns:
        VisitorConfig: Cached immutable configuration.
    """
    return VisitorConfig()


def get_ip_api_client(request: Request) -> IpApiClient:
    """
    Get the geolocation client created by the application lifespan.

    The client wraps an httpx.AsyncClient bound to the running event loop,
    so it lives on ``app.state`` rather than in a process-wide cache.

    Returns:
        IpApiClient: Client shared by all requests of this application.
    """
    return request.app.state.ip_api_client
