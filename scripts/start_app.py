#!/usr/bin/env python3
"""Serve the newsdesk API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from newsdesk.config import Settings
from newsdesk.util.observability import configure_logfire


def main() -> int:
    """Configure Logfire, then hand the app factory to uvicorn."""
    settings = Settings()

    # Before the app is built, so instrumentation attaches to a configured logfire
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting newsdesk API",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "newsdesk.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
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
