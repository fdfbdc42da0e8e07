"""Request logging middleware - one line per request with status and timing."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("vendorhub.requests")

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs every request as ``METHOD path -> status (ms)``.

    Write requests log at INFO, reads at DEBUG. The token header is never logged.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        level = logging.INFO if request.method in _WRITE_METHODS else logging.DEBUG
        logger.log(
            level,
            "%s %s -> %s (%dms) client=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request.client.host if request.client else "-",
        )
        return response
