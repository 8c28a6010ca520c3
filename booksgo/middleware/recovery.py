"""Turn unhandled handler failures into a 500 JSON response."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "error interno del servidor"


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Catch anything a handler raises so the worker keeps serving."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=500,
                content={"error": INTERNAL_ERROR_MESSAGE},
            )
