"""
Health check router for liveness and readiness checks.
"""
from fastapi import APIRouter, status

from app.database.connections import get_database

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check against the notes database",
)
async def readiness_check():
    """
    Readiness check that pings the configured notes database.
    """
    checks = {
        "api": "healthy",
        "notes_db": "unknown",
    }
    database = None

    try:
        db = await get_database()
        database = db.name
        await db.command("ping")
        checks["notes_db"] = "healthy"
    except Exception as e:
        checks["notes_db"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "database": database,
        "checks": checks,
    }
