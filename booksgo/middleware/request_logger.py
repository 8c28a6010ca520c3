"""Per-request access log line."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Log status, method, path and latency once the response is ready."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "[REQ] %3d | %-7s | %s | %.3fms",
            response.status_code,
            request.method,
            request.url.path,
            elapsed_ms,
        )
        return response
