"""Datastar 事件名稱與合併模式常數表.

The enum values are the literal strings sent on the wire; they are the only
representation used internally.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class EventType(str, Enum):
    """Datastar SSE event names."""

    MERGE_FRAGMENTS = "datastar-merge-fragments"
    REMOVE_FRAGMENTS = "datastar-remove-fragments"
    MERGE_SIGNALS = "datastar-merge-signals"
    REMOVE_SIGNALS = "datastar-remove-signals"
    EXECUTE_SCRIPT = "datastar-execute-script"


class MergeMode(str, Enum):
    """Fragment merge strategies for ``datastar-merge-fragments``."""

    MORPH = "morph"  # Idiomorph, the protocol default
    INNER = "inner"
    OUTER = "outer"
    PREPEND = "prepend"
    APPEND = "append"
    BEFORE = "before"
    AFTER = "after"
    UPSERT_ATTRIBUTES = "upsertAttributes"


# events tag
DATASTAR_MERGE_FRAGMENTS = EventType.MERGE_FRAGMENTS.value
DATASTAR_REMOVE_FRAGMENTS = EventType.REMOVE_FRAGMENTS.value
DATASTAR_MERGE_SIGNALS = EventType.MERGE_SIGNALS.value
DATASTAR_REMOVE_SIGNALS = EventType.REMOVE_SIGNALS.value
DATASTAR_EXECUTE_SCRIPT = EventType.EXECUTE_SCRIPT.value

# merge_modes tag
MERGEMODE_MORPH = MergeMode.MORPH.value
MERGEMODE_INNER = MergeMode.INNER.value
MERGEMODE_OUTER = MergeMode.OUTER.value
MERGEMODE_PREPEND = MergeMode.PREPEND.value
MERGEMODE_APPEND = MergeMode.APPEND.value
MERGEMODE_BEFORE = MergeMode.BEFORE.value
MERGEMODE_AFTER = MergeMode.AFTER.value
MERGEMODE_UPSERTATTRIBUTES = MergeMode.UPSERT_ATTRIBUTES.value

EVENTS = (
    "DATASTAR_MERGE_FRAGMENTS",
    "DATASTAR_REMOVE_FRAGMENTS",
    "DATASTAR_MERGE_SIGNALS",
    "DATASTAR_REMOVE_SIGNALS",
    "DATASTAR_EXECUTE_SCRIPT",
)

MERGE_MODES = (
    "MERGEMODE_MORPH",
    "MERGEMODE_INNER",
    "MERGEMODE_OUTER",
    "MERGEMODE_PREPEND",
    "MERGEMODE_APPEND",
    "MERGEMODE_BEFORE",
    "MERGEMODE_AFTER",
    "MERGEMODE_UPSERTATTRIBUTES",
)

EXPORT_TAGS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {"events": EVENTS, "merge_modes": MERGE_MODES}
)


def _event_key(name: str) -> str:
    return name.replace("-", "_").upper()


# 以大寫、底線形式為 key，比對時不分大小寫與連字號/底線
_EVENTS_BY_KEY: Mapping[str, EventType] = MappingProxyType(
    {_event_key(event.value): event for event in EventType}
)
_MERGE_MODES_BY_KEY: Mapping[str, MergeMode] = MappingProxyType(
    {mode.value.upper(): mode for mode in MergeMode}
)


def lookup_event(name: Any) -> Optional[EventType]:
    """
    Resolve any accepted spelling of an event name.

    Examples:
        >>> lookup_event("datastar-merge-fragments")
        <EventType.MERGE_FRAGMENTS: 'datastar-merge-fragments'>
        >>> lookup_event("DATASTAR_MERGE_FRAGMENTS") is EventType.MERGE_FRAGMENTS
        True
        >>> lookup_event("merge-fragments") is None
        True
    """
    if isinstance(name, EventType):
        return name
    if not isinstance(name, str) or not name:
        return None
    return _EVENTS_BY_KEY.get(_event_key(name))


def canonical_merge_mode(name: Any) -> Optional[str]:
    """Canonical spelling of a merge mode, or None when unrecognized."""
    if isinstance(name, MergeMode):
        return name.value
    if not isinstance(name, str) or not name:
        return None
    mode = _MERGE_MODES_BY_KEY.get(name.upper())
    return mode.value if mode else None


def is_recognized_event(name: Any) -> bool:
    """Whether ``name`` is one of the five Datastar event names."""
    return lookup_event(name) is not None


def is_recognized_merge_mode(name: Any) -> bool:
    """Whether ``name`` is one of the eight merge modes (case-insensitive)."""
    return canonical_merge_mode(name) is not None
