"""
HR API Backend — Health Check and Index Routes
================================================

What:  GET /api/v1/health liveness probe and the plain-text GET / greeting.
Who:   Docker health checks, load balancers and humans with curl.

The health check reports process liveness only. It does not touch the
database, so a slow store never makes the probe hang.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from hrapi import __version__
from hrapi.schemas.common import HealthResponse

router = APIRouter(tags=["Health"])
index_router = APIRouter(tags=["Health"])

# Module-level: set once at import, read by every health check
_start_time = time.monotonic()


def _utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    """Returns status, uptime in seconds, server time and version."""
    return HealthResponse(
        status=status.HTTP_200_OK,
        uptime=round(time.monotonic() - _start_time, 3),
        timestamp=_utc_timestamp(),
        version=__version__,
    )


@index_router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def index() -> str:
    return "Hello, world"
