from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging.context import CORRELATION_ID_HEADER, bind_request_context


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id, path and method to every log line of a request.

    The correlation id is taken from the incoming X-Correlation-ID header
    when present and echoed back on the response.
    """

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            return response
