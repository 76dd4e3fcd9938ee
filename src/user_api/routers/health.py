"""Health check router for API server monitoring."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Response

from ..config import Settings
from ..database import test_database_connection
from ..dependencies import ApiResponseDep, get_app_settings

router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={503: {"description": "Service unavailable"}},
)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "",
    summary="Basic health check",
    description="Returns basic health status of the API server",
)
async def health_check(
    responses: ApiResponseDep,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Response:
    """Basic health check endpoint.

    Example:
        {
            "status": "healthy",
            "timestamp": "2024-01-01T12:00:00+00:00",
            "environment": "development",
            "service": "user-management-api"
        }
    """
    return responses.ok({
        "status": "healthy",
        "timestamp": _timestamp(),
        "environment": settings.environment,
        "service": "user-management-api",
    })


@router.get(
    "/ready",
    summary="Readiness probe",
    description="Reports ready only when the database answers",
)
async def readiness_probe(responses: ApiResponseDep) -> Response:
    """Readiness probe.

    Returns 503 when the database cannot be reached.
    """
    if not test_database_connection():
        return responses.service_unavailable("Service not ready - database unavailable")

    return responses.ok({"ready": True, "timestamp": _timestamp()})
