"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from xns import __version__
from xns.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its resolver.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    resolver = getattr(request.app.state, "resolver", None)
    if resolver is not None:
        services["resolver"] = "up"
        services["cache"] = "up"
    else:
        services["resolver"] = "down"
        services["cache"] = "unknown"
        overall_status = "unhealthy"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        network=resolver.network if resolver is not None else None,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    return {"ready": getattr(request.app.state, "resolver", None) is not None}
