"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 while any required environment key is missing

Design Decisions:
    - Separate liveness/readiness: a misconfigured instance stays alive (its
      routes report the missing key) but is taken out of rotation
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app import SERVICE_NAME, SERVICE_VERSION
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe — all required environment keys present."""
    missing = settings.missing_required()
    if missing:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "missing": missing},
        )
    return {"status": "ready"}
