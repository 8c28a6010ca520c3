"""Process entry point - local HTTP listener or Lambda hand-off."""
from __future__ import annotations

import logging
import os

from booksgo.config import load_settings
from booksgo.router import create_app
from booksgo.transport import select_transport

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    settings = load_settings()
    app = create_app(settings.root_path)
    transport = select_transport(settings, app)

    if not settings.in_function_host:
        logger.info("[BOOT] Local en :%d (basePath=%s)", settings.port, settings.root_path)
    transport.serve()


if __name__ == "__main__":
    main()
