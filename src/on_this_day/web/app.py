# ABOUTME: FastAPI application factory with timeline service lifespan.
# ABOUTME: Main entry point for the "on this day" JSON API.

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from on_this_day.services.timeline import TimelineService
from on_this_day.web.routes import api, moderation

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan context for service setup/teardown."""
    logger.info("app_startup")
    app.state.timeline = TimelineService()
    yield
    logger.info("app_shutdown")
    app.state.timeline.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="On This Day",
        description="Historical events for a calendar date, merged with moderated user submissions",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(api.router)
    app.include_router(moderation.router)

    return app


# Application instance for uvicorn
app = create_app()
