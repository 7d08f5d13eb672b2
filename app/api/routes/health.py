"""
Health check API routes
"""
import time
from datetime import datetime
from fastapi import APIRouter, status, Depends
from typing import Dict, Any
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.models import HealthCheckResponse
from app.core.config import settings
from app.core.database import get_database_health
from app.core.dependencies import get_db
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

# Store application start time for uptime calculation
start_time = time.time()


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns health status of the application"
)
async def health_check() -> HealthCheckResponse:
    return HealthCheckResponse(
        status="healthy",
        version=settings.version,
        service=settings.app_name,
        environment="development" if settings.debug else "production"
    )


@router.get(
    "/health/database",
    status_code=status.HTTP_200_OK,
    summary="Database health check",
    description="Tests database connectivity and reports collection sizes"
)
async def database_health(db: AsyncIOMotorDatabase = Depends(get_db)) -> Dict[str, Any]:
    """
    Database-specific health check endpoint.

    Never fails: an unreachable database is reported as ``unavailable``.
    """
    health_info = await get_database_health(db)

    if health_info.get("status") != "healthy":
        return {
            "database": "unavailable",
            "error": health_info.get("error") if settings.debug else "Connection failed",
            "timestamp": datetime.utcnow().isoformat()
        }

    return {
        "database": "connected",
        "name": settings.database_name,
        "status": health_info["status"],
        "response_time_ms": health_info.get("response_time_ms"),
        "mongodb_version": health_info.get("mongodb_version"),
        "collections": health_info.get("collections", {}),
        "uptime_seconds": round(time.time() - start_time, 1),
        "timestamp": datetime.utcnow().isoformat()
    }
