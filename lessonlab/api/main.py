"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, lessonlab.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from lessonlab.api.deps.dependencies import get_service_cache
from lessonlab.configs import get_settings
from lessonlab.observability.logger import configure_logging
from lessonlab.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import challenges_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging(get_settings().log_level)
    logger = logging.getLogger("uvicorn")

    cache = get_service_cache()
    _ = cache.content_store
    _ = cache.sandbox_client
    _ = cache.query_client
    _ = cache.identity_client
    logger.info("Service cache pre-warmed")

    yield

    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="LessonLab Verification API",
        description="Code-challenge verification against learner sandboxes",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(challenges_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "lessonlab.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
