"""
api.routers.health - Health check endpoint.

The proxy holds no state, so being able to answer is the whole check.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from api.models import HealthResponse

router = APIRouter()


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check API health status."""
    return HealthResponse(status="healthy", timestamp=utc_timestamp())
