"""FastAPI application entry point.

Catalog service exposing categories and products over a JSON REST API.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app import __version__
from app.config import settings
from app.infra.database import close_db_engine, create_tables, verify_db_connection
from app.infra.logging import get_logger, setup_logging
from app.schemas.common import ErrorResponse

# Import routers
from app.api.routes.categories import router as categories_router
from app.api.routes.health import router as health_router
from app.api.routes.products import router as products_router

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Create missing tables (unless disabled)
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info(
        "Catalog service starting",
        environment=settings.environment,
        version=__version__,
    )

    if settings.db_create_tables:
        try:
            await create_tables()
        except Exception as e:
            logger.warning("Failed to create tables", error=str(e))

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    # Shutdown
    logger.info("Catalog service shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


# Create FastAPI app
app = FastAPI(
    title="Catalog Service",
    description="API for managing categories and products",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# CORS middleware (mainly for local development)
if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with method, path, status and duration."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        method=request.method,
        path=request.url.path,
    )
    start_time = time.perf_counter()

    response = await call_next(request)

    logger.info(
        "Request handled",
        status_code=response.status_code,
        duration_ms=int((time.perf_counter() - start_time) * 1000),
    )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Constraint violations from the store (e.g. duplicate category name)."""
    logger.warning(
        "Constraint violation",
        error=str(exc.orig),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Constraint violation",
            error_type=type(exc).__name__,
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            error_type=type(exc).__name__,
        ).model_dump(),
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(categories_router, prefix="/categories", tags=["Categories"])
app.include_router(products_router, prefix="/products", tags=["Products"])


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "Catalog Service",
        "version": __version__,
        "environment": settings.environment,
    }
