"""Category admin API main application module.

This module builds the FastAPI application: record store lifecycle,
middleware, routers and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from category_admin.api.category_mappings import router as category_mappings_router
from category_admin.api.health import router as health_router
from category_admin.api.middleware import setup_middleware
from category_admin.api.product_skus import router as product_skus_router
from category_admin.api.product_variants import router as product_variants_router
from category_admin.api.schemas import ErrorDetail, ErrorResponse
from category_admin.api.team_members import router as team_members_router
from category_admin.domain.exceptions import DomainError, NotFoundError, ValidationFailedError
from category_admin.infrastructure.config import Settings, settings
from category_admin.infrastructure.logging_config import configure_logging
from category_admin.infrastructure.seed import seed_store
from category_admin.infrastructure.store import RecordStore

logger = structlog.get_logger()


def build_store(app_settings: Settings) -> RecordStore:
    """Create the process-wide record store, seeded if configured."""
    store = RecordStore()
    if app_settings.seed_data:
        seed_store(store)
    return store


# ============================================================================
# Error Responses
# ============================================================================


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    errors: list[ErrorDetail] | None = None,
) -> JSONResponse:
    """Build an error response in the standard format."""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        errors=errors or [],
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to HTTP statuses."""
    if isinstance(exc, NotFoundError):
        return error_response(request, 404, "NOT_FOUND", exc.message)

    if isinstance(exc, ValidationFailedError):
        return error_response(
            request,
            400,
            "VALIDATION_ERROR",
            exc.message,
            [ErrorDetail(**error) for error in exc.errors],
        )

    logger.error(
        "Unhandled domain error",
        path=request.url.path,
        method=request.method,
        error=exc.message,
    )
    return error_response(request, 500, "INTERNAL_ERROR", "An internal error occurred")


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed input as 400 with field-level detail."""
    errors = [
        ErrorDetail(
            field=".".join(str(part) for part in error["loc"] if part != "body") or None,
            message=error["msg"],
        )
        for error in exc.errors()
    ]
    return error_response(request, 400, "VALIDATION_ERROR", "Invalid input", errors)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    error_code = "NOT_FOUND" if exc.status_code == 404 else "ERROR"
    return error_response(request, exc.status_code, error_code, str(exc.detail))


# ============================================================================
# Application Factory
# ============================================================================


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        app_settings: Settings override; defaults to the environment.

    Returns:
        Configured application. The record store is created on startup.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Create the record store on startup and drop it on shutdown."""
        logger.info(
            "Starting category admin API",
            version=app_settings.api_version,
            debug=app_settings.debug,
        )
        app.state.store = build_store(app_settings)

        yield

        app.state.store = None
        logger.info("Shutting down category admin API")

    app = FastAPI(
        title="Category Admin API",
        description="Category mapping, product grouping and enrichment dashboard backend",
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_middleware(app)

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(health_router, tags=["Health"])
    app.include_router(category_mappings_router)
    app.include_router(product_variants_router)
    app.include_router(product_skus_router)
    app.include_router(team_members_router)

    return app


app = create_app()
