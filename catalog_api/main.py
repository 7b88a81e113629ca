# ==============================================================================
# MAIN APPLICATION - FastAPI Entry Point
# ==============================================================================
# Application factory with lifespan events, middleware, and routing
# ==============================================================================

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.api.router import build_api_router
from catalog_api.core.constants import ErrorMessages
from catalog_api.core.exceptions import AppException
from catalog_api.core.logging import log_settings, setup_logging
from catalog_api.core.settings import Settings, get_settings
from catalog_api.database.factory import DatabaseFactory
from catalog_api.middleware import build_middleware

logger = logging.getLogger(__name__)


# ==============================================================================
# LIFESPAN MANAGEMENT
# ==============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Startup: Configure logging, connect and synchronize the database
    - Shutdown: Close database connections

    A database that cannot be reached aborts startup.
    """
    settings: Settings = app.state.settings

    # Startup
    setup_logging(settings)
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    log_settings(logger, settings)

    await app.state.db.connect()
    logger.info("Database connection & schema sync successful")
    app.state.started_at = time.monotonic()

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await app.state.db.disconnect()
    logger.info("Application shutdown complete")


# ==============================================================================
# APPLICATION FACTORY
# ==============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build with (defaults to ``get_settings()``)

    Returns:
        Configured FastAPI application instance

    Raises:
        ConfigurationError: If the database driver is not supported
    """
    settings = settings or get_settings()
    adapter = DatabaseFactory.create_adapter(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.API_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        middleware=build_middleware(settings),
        docs_url="/docs" if settings.DOCS_ENABLED else None,
        redoc_url="/redoc" if settings.DOCS_ENABLED else None,
        openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
    )

    app.state.settings = settings
    app.state.db = adapter
    app.state.started_at = time.monotonic()

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(build_api_router(settings.API_V1_PREFIX))

    return app


# ==============================================================================
# EXCEPTION HANDLERS
# ==============================================================================

def _envelope(status_code: int, message: str) -> dict:
    return {
        "status": "error",
        "status_code": status_code,
        "data": None,
        "message": message,
    }


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Anything not handled here reaches ``RecoveryMiddleware``.
    """

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> JSONResponse:
        """Handle application exceptions."""
        logger.debug(
            f"{request.method} {request.url.path} -> {exc.status_code} "
            f"{exc.error_code}: {exc.message} {exc.details}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Render framework errors (unknown route, wrong method) as envelopes."""
        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request parameter validation errors."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_envelope(status.HTTP_400_BAD_REQUEST, ErrorMessages.INVALID_INPUT),
        )


# Create application instance
app = create_app()


# ==============================================================================
# SERVER RUNNER
# ==============================================================================

def run() -> None:
    """Serve the application with uvicorn on APP_HOST:APP_PORT."""
    settings = get_settings()
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
