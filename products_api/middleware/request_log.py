"""Request logging middleware — one log line per request with status and latency."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs ``METHOD path -> status (ms)`` for every request.

    Requests that blow up before a response is produced are logged at ERROR
    and re-raised for the exception handlers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.monotonic() - start) * 1000)
            logger.error(
                "%s %s -> unhandled error (%dms)",
                request.method, request.url.path, duration_ms,
            )
            raise
        duration_ms = round((time.monotonic() - start) * 1000)

        logger.info(
            "%s %s -> %d (%dms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
