#!/usr/bin/env python3
"""Start the Fandom Lounge API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from lounge.config import Settings
from lounge.util.logging import setup_logging
from lounge.util.observability import configure_logfire, instrument_httpx


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    instrument_httpx()

    try:
        logfire.info(
            "Starting Fandom Lounge API",
            host=settings.api.host,
            port=settings.api.port,
        )

        uvicorn.run(
            "lounge.interface.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
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
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
