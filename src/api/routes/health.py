"""Health check endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.config import settings
from infrastructure.database.session import ping

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None
    captcha: str | None = None


async def get_database_status() -> str:
    return await ping()


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """Liveness only; the profile store is not contacted."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    database: str = Depends(get_database_status),
) -> HealthResponse:
    """
    Readiness check for monitoring.

    Reports the profile store round trip and whether a reCAPTCHA secret
    is configured. Registration cannot succeed without one, but that
    alone does not degrade the service.
    """
    return HealthResponse(
        status="healthy" if database == "healthy" else "degraded",
        version=settings.app_version,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
        database=database,
        captcha="configured" if settings.recaptcha_secret_key else "missing secret",
    )
