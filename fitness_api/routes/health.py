"""
Fitness API — Health Check Route
==================================

What:  Health check endpoint for monitoring and container liveness checks.
How:   Pings MongoDB through the handle created at startup.

Status levels:
    - healthy:   MongoDB answered the ping
    - unhealthy: No database handle, or the ping failed
"""

import logging
import time

from fastapi import APIRouter, Request
from pymongo.errors import PyMongoError

from fitness_api import __version__
from fitness_api.database import ping
from fitness_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    database = getattr(request.app.state, "database", None)
    if database is None:
        db_status = "disconnected"
        overall = "unhealthy"
    else:
        try:
            await ping(database)
        except PyMongoError as e:
            db_status = "disconnected"
            overall = "unhealthy"
            logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
