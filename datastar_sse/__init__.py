"""Datastar Server-Sent Event SDK.

    from datastar_sse import DatastarSSE, MERGEMODE_OUTER

    frame = DatastarSSE.merge_fragments(html, {"selector": "#name", "merge_mode": MERGEMODE_OUTER})
    response.write(frame)
"""

from .models.event_types import (
    EventType,
    MergeMode,
    EVENTS,
    MERGE_MODES,
    EXPORT_TAGS,
    DATASTAR_MERGE_FRAGMENTS,
    DATASTAR_REMOVE_FRAGMENTS,
    DATASTAR_MERGE_SIGNALS,
    DATASTAR_REMOVE_SIGNALS,
    DATASTAR_EXECUTE_SCRIPT,
    MERGEMODE_MORPH,
    MERGEMODE_INNER,
    MERGEMODE_OUTER,
    MERGEMODE_PREPEND,
    MERGEMODE_APPEND,
    MERGEMODE_BEFORE,
    MERGEMODE_AFTER,
    MERGEMODE_UPSERTATTRIBUTES,
    is_recognized_event,
    is_recognized_merge_mode,
)
from .models.options import (
    MergeFragmentsOptions,
    MergeSignalsOptions,
    RemoveFragmentsOptions,
    RemoveSignalsOptions,
    ExecuteScriptOptions,
)
from .models.payload import TextRef
from .services.datastar_sse import DatastarSSE

__version__ = "0.8.0"

__all__ = [
    "DatastarSSE",
    "TextRef",
    "EventType",
    "MergeMode",
    "MergeFragmentsOptions",
    "MergeSignalsOptions",
    "RemoveFragmentsOptions",
    "RemoveSignalsOptions",
    "ExecuteScriptOptions",
    "is_recognized_event",
    "is_recognized_merge_mode",
    "EVENTS",
    "MERGE_MODES",
    "EXPORT_TAGS",
    *EVENTS,
    *MERGE_MODES,
]
