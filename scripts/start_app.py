#!/usr/bin/env python3
"""Serve the API with uvicorn after observability is configured."""

import sys

import logfire
import uvicorn

from acadly.config import Settings
from acadly.util.observability import configure_observability


def main() -> int:
    settings = Settings()
    configure_observability(settings)

    logfire.info("Starting ACADLY API", port=settings.port)
    try:
        uvicorn.run(
            "acadly.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            # Keep uvicorn's records flowing through the logfire handler
            log_config=None,
        )
    except Exception as e:
        logfire.exception("API failed to start", error_type=type(e).__name__)
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
