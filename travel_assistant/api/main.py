"""
FastAPI application factory.

Creates and configures the FastAPI app with:
- CORS middleware
- Route registration
- Exception handlers
- Startup/shutdown events
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from travel_assistant import __version__
from travel_assistant.core.config import get_settings
from travel_assistant.core.database import init_db
from travel_assistant.core.exceptions import (
    InvalidArgument,
    RegionStoreError,
    SlugCollisionError,
    ValidationFailed,
)

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Travel Assistant API")
    logger.info(f"Site URL: {settings.site_url}")
    logger.info(f"Email provider: {settings.email_provider}")

    try:
        init_db()
    except Exception as e:
        logger.warning(f"Database init warning: {e}")

    yield

    logger.info("Shutting down API")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title="Travel Assistant API",
        description="Ride-share offers and needs organized by US state",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from travel_assistant.api.routes import health, states
    from travel_assistant.api.routes.admin import settings as admin_settings

    # Public routes
    app.include_router(health.router, tags=["health"])
    app.include_router(states.router, prefix="/api/states", tags=["states"])

    # Admin routes
    app.include_router(admin_settings.router, prefix="/api/admin/settings", tags=["admin"])

    @app.exception_handler(InvalidArgument)
    async def invalid_argument_handler(request: Request, exc: InvalidArgument):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(SlugCollisionError)
    async def slug_collision_handler(request: Request, exc: SlugCollisionError):
        logger.error(str(exc))
        return JSONResponse(
            status_code=500,
            content={"detail": "State data is inconsistent", "error_code": "slug_collision"},
        )

    @app.exception_handler(RegionStoreError)
    async def region_store_handler(request: Request, exc: RegionStoreError):
        logger.error(f"Region store failure: {exc}")
        return JSONResponse(
            status_code=503,
            content={"detail": "State data is unavailable", "error_code": "region_store"},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    return app


# Create default app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "travel_assistant.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
