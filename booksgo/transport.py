"""Ways of getting requests into the app: a local listener or AWS Lambda."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import cached_property

import uvicorn
from fastapi import FastAPI

from booksgo.config import Settings

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Delivers requests to an ASGI app."""

    def __init__(self, app: FastAPI):
        self.app = app

    @abstractmethod
    def serve(self) -> None:
        """Run until the host stops the process."""


class HttpListenerTransport(Transport):
    """Blocking uvicorn server on a TCP port."""

    def __init__(self, app: FastAPI, port: int, host: str = "0.0.0.0"):
        super().__init__(app)
        self.port = port
        self.host = host

    def serve(self) -> None:
        config = uvicorn.Config(self.app, host=self.host, port=self.port, log_config=None)
        server = uvicorn.Server(config)
        try:
            server.run()
        except SystemExit as exc:
            # uvicorn logs a failed bind itself and exits non-zero.
            if exc.code not in (None, 0):
                logger.critical("[FATAL] listener on :%d failed (exit code %s)", self.port, exc.code)
            raise

        if not server.started:
            logger.critical("[FATAL] listener on :%d stopped before accepting connections", self.port)
            raise SystemExit(1)


class FunctionHostTransport(Transport):
    """API Gateway / Lambda invocation payloads, translated by Mangum."""

    @cached_property
    def adapter(self):
        """Mangum adapter, created on the first invocation."""
        from mangum import Mangum

        return Mangum(self.app, lifespan="off")

    def handle(self, event: dict, context) -> dict:
        """Run one invocation through the app and return the host's response payload."""
        return self.adapter(event, context)

    def serve(self) -> None:
        # The Lambda runtime calls the module-level handler; nothing to run here.
        logger.info("[BOOT] Function host detected; invocations go through booksgo.lambda_handler.handler")


def select_transport(settings: Settings, app: FastAPI) -> Transport:
    if settings.in_function_host:
        return FunctionHostTransport(app)
    return HttpListenerTransport(app, port=settings.port)
