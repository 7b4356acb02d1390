"""Logfire setup and instrumentation.

Application code logs through logfire directly:

    logfire.info("Points awarded", profile_id=str(profile_id), amount=5)

    with logfire.span("upvote_service.toggle", recommendation_id=str(rec_id)):
        ...

Records from the standard logging module (uvicorn, alembic, SQLAlchemy) are
forwarded to logfire as well, so every process entry point only has to call
configure_observability once.
"""

import logging

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from acadly.config import Settings

SERVICE_NAME = "acadly-backend"
SERVICE_VERSION = "0.1.0"

# Third-party loggers that are noisy below WARNING
_QUIET_LOGGERS = ("httpx", "httpcore", "passlib", "asyncio")


def _log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def configure_observability(settings: Settings) -> None:
    """Configure logfire and route stdlib logging into it.

    Sending to the logfire backend is on when explicitly enabled, or when a
    token is present and it was not explicitly disabled. The local console
    is always on.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    level = _log_level(settings)
    logging.basicConfig(
        level=level, handlers=[logfire.LogfireLoggingHandler()], force=True
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        log_level=logging.getLevelName(level),
        send_to_logfire=send_to_logfire,
    )


def instrument_app(app: FastAPI) -> None:
    """Trace incoming requests and outgoing httpx calls.

    Headers are not captured because the session cookie travels in them.
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app, capture_headers=False, request_attributes_mapper=_request_attributes
    )
    logfire.instrument_httpx()


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
