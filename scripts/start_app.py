#!/usr/bin/env python3
"""Serve the Agora API with uvicorn.

Logfire is configured before the app is built so that failures while
creating the app or the DI container are reported too.
"""

import sys

import logfire
import uvicorn

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire

APP_FACTORY = "agora.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Agora API",
        environment=settings.environment,
        host=settings.host,
        port=settings.port,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Agora API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
