"""Application factory: routes, middleware and not-found handling."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from booksgo.middleware.recovery import RecoveryMiddleware
from booksgo.middleware.request_logger import RequestLoggerMiddleware
from booksgo.paths import canonical_path, toggle_trailing_slash
from booksgo.routes import core

NOT_FOUND_MESSAGE = "ruta no encontrada"


def registered_paths(app: FastAPI, method: str) -> list[str]:
    """Paths of every route that accepts ``method``."""
    return [
        route.path for route in app.routes
        if isinstance(route, APIRoute) and method in route.methods
    ]


def find_redirect(paths: list[str], path: str) -> str | None:
    """Return the canonical registered path for a near miss, if any.

    Tries the trailing slash toggled first, then a cleaned,
    case-insensitive lookup (again allowing the trailing slash to differ).
    """
    if path == "/":
        return None

    toggled = toggle_trailing_slash(path)
    if toggled in paths:
        return toggled

    by_lower = {p.lower(): p for p in paths}
    cleaned = canonical_path(path)
    for candidate in (cleaned, toggle_trailing_slash(cleaned)):
        match = by_lower.get(candidate.lower())
        if match is not None:
            return match
    return None


async def not_found(request: Request, exc: StarletteHTTPException):
    """Redirect near misses; everything else unmatched gets a JSON 404.

    A method mismatch on a known path counts as not found.
    """
    if exc.status_code not in (404, 405):
        return await http_exception_handler(request, exc)

    path = request.url.path
    if request.method != "CONNECT":
        target = find_redirect(registered_paths(request.app, request.method), path)
        if target is not None:
            if request.url.query:
                target = f"{target}?{request.url.query}"
            status_code = 301 if request.method == "GET" else 307
            return RedirectResponse(target, status_code=status_code)

    return JSONResponse(
        status_code=404,
        content={"error": NOT_FOUND_MESSAGE, "requestPath": path},
    )


def create_app(base_path: str) -> FastAPI:
    """Build the BooksGo app with every route mounted under ``base_path``."""
    app = FastAPI(
        title="BooksGo API",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    # Last added runs first: the logger wraps recovery and sees the final status.
    app.add_middleware(RecoveryMiddleware)
    app.add_middleware(RequestLoggerMiddleware)

    app.include_router(core.build_router(base_path))
    app.add_exception_handler(StarletteHTTPException, not_found)

    return app
