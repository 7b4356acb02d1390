"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from acadly.config import Settings
from acadly.interface.api.errors import register_error_handlers
from acadly.interface.api.routes import (
    academic_events,
    auth,
    comments,
    dashboard,
    faculty_calendar,
    health,
    insights,
    leaderboard,
    notifications,
    queries,
    recommendations,
    upvotes,
)
from acadly.util.di.container import create_container, setup_di
from acadly.util.observability import instrument_app

ROUTERS = (
    health.router,
    auth.router,
    recommendations.router,
    comments.router,
    upvotes.router,
    queries.router,
    leaderboard.router,
    faculty_calendar.router,
    academic_events.router,
    notifications.router,
    dashboard.router,
    insights.router,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire is configured by the process entry point (scripts/start_app.py)
    before this runs.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one with in-memory persistence.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="ACADLY API",
        description="Faculty engagement portal: recommendations, queries, leaderboard and academic calendars",
        version="0.1.0",
    )
    instrument_app(app_instance)

    # The session cookie is only sent cross-origin with credentials allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    for router in ROUTERS:
        app_instance.include_router(router)
    register_error_handlers(app_instance)

    return app_instance


# Module-level instance for uvicorn
app = create_app()
