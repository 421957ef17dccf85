"""Health check endpoint."""

from fastapi import APIRouter

from ...config import settings
from ...models.event_types import EventType, MergeMode


router = APIRouter(prefix=settings.api_prefix, tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns:
        Health status and the recognized event / merge mode names
    """
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
        "events": [event.value for event in EventType],
        "merge_modes": [mode.value for mode in MergeMode],
    }
