"""
Notebox - Health Check Route
============================

What:  Health check endpoint for monitoring and container health checks.
How:   Reads the store the same way a request would and reports whether it
       is present and parseable.

Status levels:
    - healthy:   store file exists and holds a valid note array
    - unhealthy: store file missing, unreadable or malformed

The endpoint always answers 200 so a monitor can read the detail; the
overall verdict is in the `status` field.
"""

import logging
import time

from fastapi import APIRouter, Depends

from notebox import __version__
from notebox.dependencies import get_note_service
from notebox.exceptions import StoreError
from notebox.schemas.note import HealthResponse
from notebox.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports whether the note store can be read and how many notes it holds.",
)
async def health_check(service: NoteService = Depends(get_note_service)) -> HealthResponse:
    store_status = "ok"
    count = None

    if not service.store.path.exists():
        store_status = "missing"
    else:
        try:
            count = len(await service.list_notes())
        except StoreError as e:
            store_status = "unreadable"
            logger.warning("Health check: store unreadable: %s", e.message)

    return HealthResponse(
        status="healthy" if store_status == "ok" else "unhealthy",
        version=__version__,
        store=store_status,
        notes=count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
