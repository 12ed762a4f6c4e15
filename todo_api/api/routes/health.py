"""
Health check endpoints
Provides health and readiness status for the application

- /health (liveness): App is running (doesn't check dependencies)
- /health/ready (readiness): App can reach the database

Reference:
- https://kubernetes.io/docs/tasks/configure-pod-container/configure-liveness-readiness-startup-probes/
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from todo_api.api.dependencies import get_database
from todo_api.core.database import Database

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


class HealthResponse(BaseModel):
    """
    Response model for health check endpoints
    Reference: https://fastapi.tiangolo.com/tutorial/response-model/
    """
    status: str
    message: str


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check (liveness)",
    status_code=status.HTTP_200_OK,
)
async def health_check() -> HealthResponse:
    """Liveness probe; only confirms the process is serving"""
    return HealthResponse(status="healthy", message="Service is running")


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check",
    status_code=status.HTTP_200_OK,
    responses={
        503: {"description": "Service is not ready (database unavailable)"}
    },
)
async def readiness_check(database: Database = Depends(get_database)):
    """
    Readiness probe

    Pings the database; 503 when it cannot be reached.
    """
    try:
        await database.ping()
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Readiness check failed: {e}")
        return PlainTextResponse(
            "Service is not ready - database unavailable",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return HealthResponse(status="ready", message="Service is ready to serve traffic")
