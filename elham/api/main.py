"""
FastAPI application entry point.

Initializes the FastAPI app, registers routers, adds middleware, and
configures lifespan.

Dependencies: fastapi, elham.api.routers, elham.observability, elham.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from elham.api.deps.dependencies import get_service_cache
from elham.api.routers import admin_pages, auth, health, inquiries, public
from elham.api.routers.admin import admin_router
from elham.boundary.db.connection import get_async_engine
from elham.configs import get_settings
from elham.observability.logger import configure_logging
from elham.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and disposes the engine pool and cached
    clients on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup",
        extra={
            "environment": settings.environment,
            "storage_configured": settings.storage.is_configured,
            "email_configured": settings.email.is_configured,
        },
    )

    yield

    get_service_cache().clear()
    await get_async_engine().dispose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Elham API",
        description="Bilingual Hajj/Umrah travel back office",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Added first = innermost; correlation wraps logging so log lines carry the ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(admin_router.router, prefix="/api")
    app.include_router(inquiries.router, prefix="/api")
    app.include_router(public.router, prefix="/api")

    # HTML admin pages live outside /api
    app.include_router(admin_pages.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "elham.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=not get_settings().is_production,
    )
