"""Health endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from antifraud.config import settings

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health")
async def health() -> dict:
    from antifraud.main import get_uptime

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime_seconds": get_uptime(),
    }
