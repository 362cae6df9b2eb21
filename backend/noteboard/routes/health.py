"""
Noteboard Backend: Health Check Route
======================================

What:  Health check endpoint for monitoring and container probes.
How:   Runs SELECT 1 against the app's Database and reports the result.

Status levels:
    - healthy:   store reachable
    - unhealthy: store unreachable (still answered with HTTP 200 so the
                 report itself can be read; probes should look at `status`)
"""

import logging
import time

from fastapi import APIRouter, Request

from noteboard import __version__
from noteboard.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    """Probe the store and report aggregate status and uptime."""
    db_status = "connected"
    overall = "healthy"

    if not await request.app.state.database.ping():
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
