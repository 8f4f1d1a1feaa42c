"""Health check endpoints."""
from typing import Dict

from fastapi import APIRouter, Response, status

from app.core.database_init import check_database_health

router = APIRouter()


@router.get("/health", tags=["health"])
async def simple_health_check() -> Dict[str, str]:
    """
    Simple health check for load balancer - no dependency checks.

    Returns HTTP 200 with status "UP" if the application is running.
    """
    return {"status": "UP"}


@router.get("/health/detailed", tags=["health"])
async def detailed_health_check(response: Response) -> Dict[str, str]:
    """
    Health check including the catalog tables.

    Returns HTTP 503 when the database is unreachable or tables are missing.
    """
    if check_database_health():
        return {"status": "UP", "database": "UP"}
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {"status": "DOWN", "database": "DOWN"}
