"""Client IP resolution for incoming requests."""

from typing import Optional

from fastapi import Request

FORWARDED_FOR_HEADER = "x-forwarded-for"
UNRESOLVED_IP = "0.0.0.0"


def resolve_client_ip(forwarded_for: Optional[str], *fallbacks: Optional[str]) -> str:
    """Pick the client IP from a forwarding header or fallback addresses.

    The first non-empty comma-separated token of the forwarding header wins.
    The header is trusted as-is, so the service must sit behind a reverse
    proxy that sets it. Without a usable header, the first non-empty fallback
    is used, then ``UNRESOLVED_IP``.

    Args:
        forwarded_for: Raw X-Forwarded-For header value, if any
        *fallbacks: Addresses to try in order when the header gives nothing

    Returns:
        A non-empty IP string
    """
    if forwarded_for:
        for token in forwarded_for.split(","):
            token = token.strip()
            if token:
                return token

    for candidate in fallbacks:
        if candidate and candidate.strip():
            return candidate.strip()

    return UNRESOLVED_IP


def client_ip_from_request(request: Request) -> str:
    """Resolve the visitor IP for a FastAPI request.

    Starlette exposes a single peer address, ``request.client``, which already
    reflects any proxy header rewriting done by the ASGI server.
    """
    peer = request.client.host if request.client else None
    return resolve_client_ip(request.headers.get(FORWARDED_FOR_HEADER), peer)
