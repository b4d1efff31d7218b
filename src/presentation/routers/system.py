"""System router for non-versioned application endpoints.

Lightweight, side-effect free endpoints for health checks and diagnostics.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Welcome message with API status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns 503 when the database is unreachable.
    """
    database_ok = await get_database().check_connection()
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={
            "status": "healthy" if database_ok else "unhealthy",
            "database": "ok" if database_ok else "unavailable",
        },
    )
