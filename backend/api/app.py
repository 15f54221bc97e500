"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
    NotFoundError,
    StorefrontError,
)
from shared.logging import configure_logging

from .models.errors import ErrorResponse
from .routes import health, users
from modules.auth.routes import router as auth_router
from modules.products.routes import router as products_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic. Startup fails fast when the token
    signing secret is missing.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.jwt_secret:
        raise ConfigurationError(
            "JWT_SECRET is not set; refusing to start",
            code="SIGNING_NOT_CONFIGURED",
        )
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def _status_code_for(exc: StorefrontError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, ExternalServiceError):
        return 503
    return 500


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """
    Turn unhandled service errors into a generic fault response.

    Full detail goes to the log; 5xx responses only carry the error code
    and a fixed message.
    """
    status_code = _status_code_for(exc)
    if status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.to_dict(),
            exc_info=exc,
        )
        message = (
            "Service temporarily unavailable"
            if status_code == 503
            else "Internal server error"
        )
    else:
        message = exc.message

    body = ErrorResponse(error=exc.code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for exceptions outside the StorefrontError hierarchy."""
    logger.error(
        "%s %s failed with unhandled %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    body = ErrorResponse(error="INTERNAL_ERROR", message="Internal server error")
    return JSONResponse(status_code=500, content=body.model_dump())


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Product catalog and account API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(products_router, prefix="/api/products", tags=["products"])

    return app


# Application instance for uvicorn
app = create_app()
