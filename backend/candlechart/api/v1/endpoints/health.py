"""
Health API Endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from candlechart.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }
