"""
Health check endpoints
"""

from typing import Any
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from seat_booking.core.database import get_session, ping_db
from seat_booking.config import settings
from seat_booking.schemas.response import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/live", response_model=HealthResponse)
async def liveness() -> Any:
    """
    Kubernetes liveness probe
    """
    return HealthResponse(status="alive")


@router.get("/ready", response_model=HealthResponse)
async def readiness(
    db: AsyncSession = Depends(get_session)
) -> Any:
    """
    Kubernetes readiness probe - checks the database
    """
    checks = {"database": False, "api": True}

    try:
        checks["database"] = await ping_db(db)
    except Exception as e:
        logger.warning(f"Database readiness check failed: {e}")

    return HealthResponse(
        status="ready" if all(checks.values()) else "not ready",
        checks=checks,
        version=settings.APP_VERSION
    )
