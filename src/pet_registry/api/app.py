"""
FastAPI Application Setup.

Application factory exposing the pet registry over HTTP.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pet_registry import __version__
from pet_registry.api.middleware.caller import CallerIdentityMiddleware
from pet_registry.api.middleware.logging import RequestLoggingMiddleware
from pet_registry.api.routes import health, pets, registry as registry_routes
from pet_registry.api.schemas.exceptions import APIException
from pet_registry.config import RegistrySettings
from pet_registry.registry.storage import PetRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown."""
    logger.info("Pet Registry API starting up...")
    logger.info(f"Version: {__version__}")
    logger.info(f"Administrator: {app.state.registry.administrator}")

    yield

    logger.info("Pet Registry API shutting down...")


def create_app(
    registry: PetRegistry | None = None,
    settings: RegistrySettings | None = None,
    title: str = "Pet Registry API",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        registry: Registry to serve; built from settings when omitted
        settings: Runtime settings; read from the environment when both
            registry and settings are omitted
        title: Application title for OpenAPI docs

    Returns:
        Configured FastAPI application instance

    Raises:
        ConfigurationError: If settings come from the environment and no
            administrator is configured
    """
    if settings is None:
        if registry is None:
            settings = RegistrySettings.from_env()
        else:
            settings = RegistrySettings(administrator=registry.administrator)
    if registry is None:
        registry = settings.build_registry()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=title,
        description="Per-owner pet registry with administrator-gated deletion",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.registry = registry
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CallerIdentityMiddleware, caller_header=settings.caller_header)

    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"],
    )
    app.include_router(
        pets.router,
        prefix="/api/v1/pets",
        tags=["Pets"],
    )
    app.include_router(
        registry_routes.router,
        prefix="/api/v1",
        tags=["Registry"],
    )

    @app.exception_handler(APIException)
    async def api_exception_handler(request, exc: APIException) -> JSONResponse:
        """Handle API exceptions with proper error responses."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "type": exc.error_type,
                    "message": exc.message,
                    "detail": exc.detail,
                }
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed request bodies with per-field messages."""
        fields = {
            ".".join(str(part) for part in error["loc"]): error["msg"]
            for error in exc.errors()
        }
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "type": "validation_error",
                    "message": "Request validation failed",
                    "fields": fields,
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "type": "internal_error",
                    "message": "An unexpected error occurred",
                    "detail": str(exc) if logger.isEnabledFor(logging.DEBUG) else None,
                }
            },
        )

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, object]:
        """Root endpoint with API information."""
        return {
            "name": "Pet Registry API",
            "version": __version__,
            "status": "operational",
            "docs": "/docs",
            "health": "/health",
        }

    return app
