"""FastAPI routes for visitor tracking."""

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, RedirectResponse

from api.dependencies.rate_limits import get_limiter
from infrastructure.operations import OperationStatus
from infrastructure.services import IpApiClientDep, VisitorConfigDep
from packages.visitors.client_ip import client_ip_from_request
from packages.visitors.log_store import VisitLog
from packages.visitors.service import record_visit

logger = structlog.get_logger()
router = APIRouter(tags=["Visitors"])
limiter = get_limiter()

NO_LOGS_MESSAGE = "No logs yet."
LOG_READ_ERROR_MESSAGE = "Error reading logs."


@router.get(
    "/",
    status_code=302,
    response_class=RedirectResponse,
    summary="Log visit and redirect",
    description="Record the visitor and redirect to the fixed target URL",
)
async def visit(
    request: Request,
    config: VisitorConfigDep,
    ip_api: IpApiClientDep,
) -> RedirectResponse:
    """Record the visit, then redirect.

    The redirect is issued whatever happens while recording.
    """
    client_ip = client_ip_from_request(request)
    try:
        await record_visit(client_ip, config, ip_api)
    except Exception as e:
        logger.exception("visit_tracking_failed", ip_address=client_ip, error=str(e))
    return RedirectResponse(url=config.target_url, status_code=302)


@router.get(
    "/logs",
    response_class=PlainTextResponse,
    summary="Tail visit log",
    description="Return the most recent visit log lines as plain text",
)
@limiter.limit("60/minute")
async def read_logs(
    request: Request,  # pylint: disable=unused-argument
    config: VisitorConfigDep,
) -> PlainTextResponse:
    """Return the last ``config.tail_lines`` lines of the visit log verbatim.

    Raises nothing: a missing log is the "No logs yet." state and any read
    failure is a plain-text 500.
    """
    result = await VisitLog(config.log_path).tail(config.tail_lines)

    if result.is_success:
        lines = result.data
        return PlainTextResponse("\n".join(lines) + "\n" if lines else "")
    elif result.status == OperationStatus.NOT_FOUND:
        return PlainTextResponse(NO_LOGS_MESSAGE)
    else:
        logger.error("visit_log_read_error", error=result.message)
        return PlainTextResponse(LOG_READ_ERROR_MESSAGE, status_code=500)
