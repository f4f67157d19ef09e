"""Health & Readiness Probes - root acknowledgment and database readiness.

Invariants:
    - GET / always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from incalink.infrastructure.database import DatabaseSessionManager, get_db_manager

router = APIRouter(tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def root():
    """Liveness acknowledgment."""
    return {"message": "API is running"}


@router.get("/health/ready")
async def readiness_check(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Readiness probe - includes database connectivity."""
    if not await db_manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
