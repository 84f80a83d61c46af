"""Request logging middleware - Presentation Layer."""

from time import perf_counter
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from govee_web.shared import bind_request_context, clear_request_context, get_logger
from govee_web.shared.consts import UNLOGGED_PATHS

logger = get_logger("govee_web.http")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one structured event per request, skipping the health check.

    Each request gets an id, taken from the ``X-Request-ID`` header when the
    caller sends one. It is bound to every log line of the request and
    echoed back in the response headers.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_context(request_id=request_id)

        start = perf_counter()
        try:
            response = await call_next(request)
            latency_ms = (perf_counter() - start) * 1000

            logger.info(
                "http.request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                latency_ms=round(latency_ms, 2),
            )
        finally:
            clear_request_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
