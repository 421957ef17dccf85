"""Models package."""

from .event_types import (
    EventType,
    MergeMode,
    EVENTS,
    MERGE_MODES,
    EXPORT_TAGS,
    lookup_event,
    canonical_merge_mode,
    is_recognized_event,
    is_recognized_merge_mode,
)
from .payload import TextRef
from .responses import (
    EventRequest,
    StreamEventItem,
    StreamRequest,
    HeaderPair,
    ErrorResponse,
)

__all__ = [
    "EventType",
    "MergeMode",
    "EVENTS",
    "MERGE_MODES",
    "EXPORT_TAGS",
    "lookup_event",
    "canonical_merge_mode",
    "is_recognized_event",
    "is_recognized_merge_mode",
    "TextRef",
    "EventRequest",
    "StreamEventItem",
    "StreamRequest",
    "HeaderPair",
    "ErrorResponse",
]
