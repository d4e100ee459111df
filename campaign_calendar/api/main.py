"""FastAPI application entrypoint for the campaign calendar."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from campaign_calendar.api.middleware.logging import LoggingMiddleware
from campaign_calendar.api.routes import access, activity, admin, events, toasts
from campaign_calendar.core.exceptions import ApplicationError, UpstreamWriteError
from campaign_calendar.core.observability import setup_tracing
from campaign_calendar.services.container import ServiceContainer
from campaign_calendar.services.seed import seed_defaults

logger = logging.getLogger(__name__)


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    container = container or ServiceContainer.build()
    config = container.config

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        """Optionally seed default data on startup."""

        if config.SEED_ON_STARTUP:
            await seed_defaults(container.directory, container.events)
        logger.info("Campaign calendar started (environment=%s)", config.ENVIRONMENT)
        yield

    app = FastAPI(
        title=config.API_TITLE,
        version=config.API_VERSION,
        debug=config.DEBUG,
        lifespan=lifespan,
    )
    app.state.container = container

    setup_tracing(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # Routers
    app.include_router(access.router, prefix="/api")
    app.include_router(events.router, prefix="/api")
    app.include_router(activity.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")
    app.include_router(toasts.router, prefix="/api")

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.exception_handler(ApplicationError)
    async def handle_application_error(request: Request, exc: ApplicationError):
        """Return standardized responses and surface the failure as a toast."""

        if not isinstance(exc, UpstreamWriteError):
            request.app.state.container.toasts.info(exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "code": exc.code})

    return app


app = create_app()
