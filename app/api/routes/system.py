from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from api.dependencies.rate_limits import get_limiter
from infrastructure.services import SettingsDep

router = APIRouter(tags=["System"])
limiter = get_limiter()


@router.get("/version")
@limiter.limit("50/minute")
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


# Liveness only: no check of the log file or the geolocation service, and no
# rate limit, so the platform probe always gets an answer.
@router.get("/health", response_class=PlainTextResponse)
def get_health():
    """Healthcheck endpoint."""
    return PlainTextResponse("OK")
