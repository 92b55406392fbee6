"""Health — liveness and readiness of the fincalc API.

Invariants:
    - GET /api/health/ answers 200 while the process runs, with the installed version
    - GET /api/health/ready answers 503 when the database manager is missing
      or its connectivity check fails
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fincalc.config import get_app_version
from fincalc.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "healthy",
        "service": "fincalc-api",
        "version": get_app_version(),
    }


@router.get("/ready")
async def readiness_check():
    """Ready once a SELECT 1 round trip to the configured database succeeds."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "backend": manager.engine.dialect.name,
    }
