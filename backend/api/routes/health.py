"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    signing: str
    email: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether each collaborator is configured. It does not open
    connections, so "configured" does not mean reachable.
    """
    settings = get_settings()
    database = (
        "configured"
        if settings.supabase_url and settings.supabase_service_role_key
        else "missing"
    )
    signing = "configured" if settings.jwt_secret else "missing"
    if not settings.smtp_enabled:
        email = "disabled"
    else:
        email = "configured" if settings.smtp_host else "missing"

    ready = database == "configured" and signing == "configured"
    return ReadinessResponse(
        status="ready" if ready else "not_ready",
        database=database,
        signing=signing,
        email=email,
    )
