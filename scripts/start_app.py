#!/usr/bin/env python3
"""Start the API server with Logfire capturing startup errors."""

import sys

import logfire
import uvicorn

from ask.config import Settings
from ask.util.logging import setup_logging
from ask.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then serve the app until interrupted."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting API server", host=settings.host, port=settings.port)
        uvicorn.run(
            "ask.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
