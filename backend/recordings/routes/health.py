"""
Recordings API: Health Check Route
===================================

What:  Health check endpoint for monitoring and container liveness checks.
How:   Pings the album store and reports uptime.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from recordings import __version__
from recordings.exceptions import RecordingsError
from recordings.schemas.album import HealthResponse
from recordings.services.album_store import AlbumStore, get_album_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: AlbumStore = Depends(get_album_store),
) -> HealthResponse:
    """Runs SELECT 1 through the store and reports the outcome."""
    db_status = "connected"
    overall = "healthy"

    try:
        await store.ping()
    except RecordingsError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", e.context or e.message)

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
