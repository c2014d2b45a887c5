"""
Liveness and database readiness probes.

Routes: GET /health, GET /health/db

Dependencies: sqlalchemy, scm_backend.boundary.db
System role: Health check HTTP API
"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db import get_async_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    message: str
    latency_ms: float | None = None


@router.get("", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check() -> HealthResponse:
    """Liveness: the process is serving requests."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(db: AsyncSession = Depends(get_async_db)) -> HealthResponse:
    """
    Readiness: a round trip to the database succeeds.

    Raises:
        HTTPException(503): Database unreachable
    """
    started = time.perf_counter()
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"{__name__}:health_check_db - Database check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"code": "DB_UNAVAILABLE", "message": "Database connection failed"},
        )
    return HealthResponse(
        status="healthy",
        message="Database connection OK",
        latency_ms=round((time.perf_counter() - started) * 1000, 2),
    )
