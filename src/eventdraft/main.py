"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from eventdraft.api.middleware import setup_middleware
from eventdraft.core.config import Settings
from eventdraft.core.logging import setup_logging
from eventdraft.services.workspace import EventWorkspace

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    workspace: EventWorkspace | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    if not settings.is_testing:
        setup_logging(level=settings.log_level, log_format=settings.log_format)

    application = FastAPI(
        title="eventdraft API",
        description="Draft editors for event tickets and discount codes",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.state.settings = settings
    if workspace is None:
        workspace = (
            EventWorkspace.with_sample_data() if settings.seed_sample_data else EventWorkspace()
        )
    application.state.workspace = workspace
    logger.info("Starting eventdraft API (env=%s)", settings.app_env)

    setup_middleware(application)
    _register_routes(application)

    return application


def _register_routes(app: FastAPI) -> None:
    """Register all API route modules."""
    from eventdraft.api.routes.discount_codes import router as discount_codes_router
    from eventdraft.api.routes.health import router as health_router
    from eventdraft.api.routes.tickets import router as tickets_router

    app.include_router(health_router, tags=["health"])
    app.include_router(tickets_router)
    app.include_router(discount_codes_router)


def run() -> None:
    """Serve the app with uvicorn using host/port from settings."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "eventdraft.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


# Module-level app instance for uvicorn (uvicorn eventdraft.main:app)
app = create_app()
