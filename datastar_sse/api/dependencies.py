"""API dependencies and injection."""

from typing import Annotated
from fastapi import Depends
import logging

from ..models.event_types import EventType, lookup_event
from ..services.datastar_sse import DatastarSSE
from ..utils import ErrorCode, raise_error


logger = logging.getLogger(__name__)


def get_encoder() -> type[DatastarSSE]:
    """
    Dependency to get the event encoder.

    Returns:
        DatastarSSE class (all encoders are stateless classmethods)
    """
    return DatastarSSE


def resolve_event(event_name: str) -> EventType:
    """
    Resolve an event name from the request path.

    Raises:
        APIError: If the event name is not a Datastar event
    """
    event = lookup_event(event_name)
    if event is None:
        raise_error(
            ErrorCode.UNKNOWN_EVENT,
            f"Unknown Datastar event: {event_name}",
            status_code=404,
        )
    return event


# Type aliases for common dependencies
EncoderDep = Annotated[type[DatastarSSE], Depends(get_encoder)]
EventDep = Annotated[EventType, Depends(resolve_event)]
