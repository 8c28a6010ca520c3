"""BooksGo endpoints, mounted under a configurable base path."""
from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ConfigDict, TypeAdapter, ValidationError

from booksgo.paths import join_paths

GREETING = "📚 BooksGo API"

_json_object = TypeAdapter(dict[str, Any], config=ConfigDict(allow_inf_nan=False))

NON_FINITE_MESSAGE = "numeric value out of range for JSON (NaN or Infinity)"


def describe_parse_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into one readable line."""
    return "; ".join(err["msg"] for err in exc.errors())


def has_non_finite(value: Any) -> bool:
    """True if a parsed JSON value holds NaN or an infinity anywhere."""
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(has_non_finite(v) for v in value.values())
    if isinstance(value, list):
        return any(has_non_finite(v) for v in value)
    return False


def rfc3339_now() -> str:
    """Current local time as RFC 3339 with second precision."""
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        return stamp[:-6] + "Z"
    return stamp


def build_router(base_path: str) -> APIRouter:
    """Create the route group for ``base_path``.

    The base path is taken as-is; the greeting hint is the literal
    concatenation ``base_path + "/health"``.
    """
    router = APIRouter()
    group = join_paths("/", base_path)

    async def root():
        """Greeting plus where to look for the health check."""
        return {"message": GREETING, "hint": base_path + "/health"}

    async def health():
        return {"status": "ok"}

    async def echo(request: Request):
        """Return the posted JSON object unchanged."""
        raw = await request.body()
        try:
            body = _json_object.validate_json(raw)
        except ValidationError as exc:
            return JSONResponse(status_code=400, content={"error": describe_parse_error(exc)})
        # Overflowing literals such as 1e400 parse to inf.
        if has_non_finite(body):
            return JSONResponse(status_code=400, content={"error": NON_FINITE_MESSAGE})
        return JSONResponse(content=body)

    async def server_time():
        return {"serverTime": rfc3339_now()}

    router.add_api_route(join_paths(group, "/"), root, methods=["GET"])
    router.add_api_route(join_paths(group, "/health"), health, methods=["GET"])
    router.add_api_route(join_paths(group, "/echo"), echo, methods=["POST"])
    router.add_api_route(join_paths(group, "/time"), server_time, methods=["GET"])

    return router
