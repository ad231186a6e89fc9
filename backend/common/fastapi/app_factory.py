"""
Common FastAPI application factory with standard middleware and configuration.

This module provides a factory function for creating FastAPI applications with
consistent configuration, middleware, and error handling across services.

Features:
    - Automatic logging setup
    - CORS configuration (environment-aware)
    - Request timing middleware
    - Global exception handling
    - Health check endpoints
    - OpenAPI documentation

Endpoints:
    - GET /: Root endpoint with service information
    - GET /health: Health check endpoint
    - GET /docs: Swagger UI documentation
    - GET /redoc: ReDoc documentation

Usage:
    ```python
    from common.fastapi import create_fastapi_app
    from fastapi import APIRouter

    api_router = APIRouter()

    @api_router.get("/services")
    async def list_services():
        return []

    app = create_fastapi_app(
        service_name="content-service",
        description="Content service API",
        api_router=api_router,
    )
    ```
"""

from collections.abc import Callable
import time
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from loguru import logger

from common.config import BaseServiceSettings, get_settings
from common.logging import setup_logging

DEV_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def create_fastapi_app(
    service_name: str,
    description: str,
    api_router: APIRouter | None = None,
    additional_setup: Callable[[FastAPI, BaseServiceSettings], None] | None = None,
    root_path: str = "",
) -> FastAPI:
    """
    Create a FastAPI application with standardized configuration and middleware.

    Args:
        service_name: Name of the service (e.g., "content-service"). Used to load
            service-specific settings and configure logging.
        description: Human-readable description of the service for OpenAPI docs.
        api_router: Optional APIRouter; included under API_V1_STR (default "/api/v1").
        additional_setup: Optional callback `(app, settings) -> None` run after
            the standard configuration, e.g. to register startup handlers.
        root_path: Root path for reverse proxy scenarios. Ignored in DEV.

    Returns:
        Fully configured FastAPI application instance.

    Note:
        - CORS uses CORS_ORIGINS in production and local dev-server origins otherwise
        - Unhandled exceptions return a generic 500 message; details are logged
    """

    setup_logging(service_name)

    settings = get_settings(service_name)

    # In development we are not behind a reverse proxy
    effective_root_path = root_path if settings.ENVIRONMENT != "DEV" else ""

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        description=description,
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        root_path=effective_root_path,
    )

    if settings.ENVIRONMENT == "PROD":
        allowed_origins = settings.CORS_ORIGINS
    else:
        # allow_credentials=True is incompatible with allow_origins=["*"]
        allowed_origins = DEV_CORS_ORIGINS + list(settings.CORS_ORIGINS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(
        request: Request, call_next: Callable[[Request], Any]
    ) -> Response:
        """Add process time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(
            f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s"
        )
        return response

    if api_router:
        app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/health")
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "status": "healthy",
            "timestamp": time.time(),
        }

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint."""
        return {
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "message": f"{settings.SERVICE_NAME} is running",
            "docs": "/docs",
            "health": "/health",
        }

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.opt(exception=exc).error(
            f"Unhandled exception in {request.method} {request.url.path}: {exc}"
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "An error occurred while processing your request. Please try again later."
            },
        )

    if additional_setup:
        additional_setup(app, settings)

    return app
