"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP server runtime configuration.

    Environment Variables:
        PORT: Port the server listens on (default: 10000)
        HOST: Interface the server binds to (default: 0.0.0.0)

    Example:
        ```python
        from infrastructure.services import get_settings

        port = get_settings().server.PORT
        ```
    """

    PORT: int = Field(default=10000, alias="PORT")
    HOST: str = Field(default="0.0.0.0", alias="HOST")
