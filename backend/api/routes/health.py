"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import missing_supabase_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    auth: str
    missing: list[str] = []


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

    Reports whether Supabase and JWT validation are configured. No
    network calls are made.
    """
    settings = get_settings()
    supabase_missing = missing_supabase_settings(settings)
    auth_missing = [] if settings.supabase_jwt_secret else ["SUPABASE_JWT_SECRET"]
    missing = supabase_missing + auth_missing

    database = "not_configured" if supabase_missing else "configured"
    auth = "not_configured" if auth_missing else "configured"

    return ReadinessResponse(
        status="ready" if not missing else "degraded",
        database=database,
        auth=auth,
        missing=missing,
    )
