"""
Health check router for liveness and readiness checks.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from bookvibe.database.connections import MongoStore
from bookvibe.dependencies.store import get_store

router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Liveness text",
)
async def root():
    """Plain-text liveness message."""
    return "Book Vibe is running"


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
    summary="Readiness check with dependencies",
)
async def readiness_check(store: MongoStore = Depends(get_store)):
    """
    Readiness check that verifies the database connection.
    Returns 200 with status "degraded" if MongoDB is unreachable.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    try:
        await store.ping()
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
