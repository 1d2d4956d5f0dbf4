#!/usr/bin/env python3
"""Serve the forum API with uvicorn."""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    # Before the app import, so startup failures are traced too
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting forum API",
            port=settings.port,
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "forum.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=settings.environment != "development",
        )
    except Exception:
        logfire.exception("Forum API failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
