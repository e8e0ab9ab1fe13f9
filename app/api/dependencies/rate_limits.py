from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from packages.visitors.client_ip import client_ip_from_request


def visitor_key_func(request: Request) -> str:
    """Rate limit per visitor IP, honouring X-Forwarded-For.

    The service runs behind a reverse proxy, so keying on the socket peer
    would put every visitor in the proxy's bucket.
    """
    return client_ip_from_request(request)


limiter = Limiter(
    key_func=visitor_key_func,
)


async def rate_limit_handler(_request: Request, exc: Exception):
    """Custom rate limit handler that returns a 429 status code and a custom error message."""
    if isinstance(exc, RateLimitExceeded):
        return JSONResponse(
            status_code=429,
            content={"message": "Rate limit exceeded"},
        )


def setup_rate_limiter(app: FastAPI):
    """
    Setup rate limiting for the FastAPI application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
