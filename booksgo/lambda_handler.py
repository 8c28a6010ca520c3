"""AWS Lambda entry point.

Mangum translates API Gateway HTTP API (v2) events into ASGI, so the same
FastAPI app runs unchanged on Lambda. Settings are read once per cold start.
"""

from booksgo.config import load_settings
from booksgo.router import create_app
from booksgo.transport import FunctionHostTransport

settings = load_settings()
app = create_app(settings.root_path)

handler = FunctionHostTransport(app).handle
