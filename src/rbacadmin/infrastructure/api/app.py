"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with middleware, routes,
exception handlers and lifecycle handlers.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rbacadmin.core.config import get_settings
from rbacadmin.core.exceptions import (
    AdminError,
    ErrorType,
    NameTakenError,
    NotFoundError,
)
from rbacadmin.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from rbacadmin.domain.services.result_helper import ResultHelper
from rbacadmin.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)

result_helper = ResultHelper()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configures logging and the database on startup and closes the database
    on shutdown.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting RBAC Admin",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down RBAC Admin")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Role-based access control administration",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Return 200 while the service is running; dependencies are not checked."""
        return {
            "status": "healthy",
            "service": "RBAC Admin",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Return 200 when the database is reachable, 503 otherwise."""
        db_healthy = await get_db_manager().check_connection()

        if db_healthy:
            return {
                "status": "ready",
                "service": "RBAC Admin",
                "version": get_settings().app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "service": "RBAC Admin",
                "database": "disconnected",
            },
        )

    @app.get("/live", tags=["health"])
    async def liveness_check():
        """Liveness probe."""
        return {
            "status": "alive",
            "service": "RBAC Admin",
            "version": get_settings().app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
    """
    from rbacadmin.infrastructure.api.routes import groups_router

    settings = get_settings()

    app.include_router(groups_router, prefix=f"{settings.api_prefix}/groups")

    @app.get(settings.api_prefix, tags=["root"])
    async def api_root():
        """API root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "api_version": "v1",
        }


def error_status_code(exc: AdminError) -> int:
    """Map a service error to an HTTP status code."""
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, NameTakenError):
        return status.HTTP_409_CONFLICT
    if exc.error_type is ErrorType.GRP0011:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(AdminError)
    async def admin_error_handler(request: Request, exc: AdminError):
        """Turn service errors into failure envelopes."""
        status_code = error_status_code(exc)
        logger.info(
            "Request failed",
            path=str(request.url.path),
            method=request.method,
            status_code=status_code,
            error_code=exc.code,
            error=exc.message,
        )
        return JSONResponse(
            status_code=status_code,
            content=result_helper.failure_response(exc).model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        message = str(exc) if get_settings().debug else "An unexpected error occurred"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=result_helper.failure_response(ErrorType.SYS0001, message).model_dump(
                mode="json"
            ),
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log every request and propagate a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


app = create_app()
