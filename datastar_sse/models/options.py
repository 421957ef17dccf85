"""Per-event option structs.

Option values that are present but invalid fall back to the named defaults
below.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .event_types import MergeMode, canonical_merge_mode
from ..utils.json_codec import bool_token
from ..utils.predicates import is_array_like, is_int_like
from ..utils.sse import has_line_break


logger = logging.getLogger(__name__)


DEFAULT_MERGE_MODE = MergeMode.MORPH.value
DEFAULT_SETTLE_DURATION = 300
DEFAULT_USE_VIEW_TRANSITION = False
DEFAULT_ONLY_IF_MISSING = False
DEFAULT_AUTO_REMOVE = False


_FALSE_TOKENS = {"", "0", "false", "no", "off"}


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_TOKENS
    return bool(value)


class EventOptions(BaseModel):
    """Frame-level options shared by every event."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    event_id: Optional[str] = None
    retry_duration: Optional[int] = None

    @field_validator("event_id", mode="before")
    @classmethod
    def coerce_event_id(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        value = str(value)
        if has_line_break(value):
            logger.debug("Dropping event_id containing a line break")
            return None
        return value

    @field_validator("retry_duration", mode="before")
    @classmethod
    def coerce_retry(cls, value: Any) -> Optional[int]:
        if value is None or not is_int_like(value) or int(value) < 0:
            return None
        return int(value)

    @classmethod
    def from_options(cls, options: Any = None):
        """
        Build the struct from a mapping, an existing instance or None.

        Any other shape yields the defaults.
        """
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.model_validate(dict(options))
        return cls()


class RemoveFragmentsOptions(EventOptions):
    """Options for ``datastar-remove-fragments``."""


class RemoveSignalsOptions(EventOptions):
    """Options for ``datastar-remove-signals``."""


class MergeFragmentsOptions(EventOptions):
    """Options for ``datastar-merge-fragments``."""

    selector: Optional[str] = None
    merge_mode: Optional[str] = None
    settle_duration: Optional[int] = None
    use_view_transition: bool = DEFAULT_USE_VIEW_TRANSITION

    @field_validator("selector", mode="before")
    @classmethod
    def coerce_selector(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        value = str(value)
        if has_line_break(value):
            logger.debug("Dropping selector containing a line break")
            return None
        return value

    @field_validator("merge_mode", mode="before")
    @classmethod
    def coerce_merge_mode(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        mode = canonical_merge_mode(value)
        if mode is None:
            logger.debug(f"Unrecognized merge mode {value!r}, using {DEFAULT_MERGE_MODE}")
            return DEFAULT_MERGE_MODE
        return mode

    @field_validator("settle_duration", mode="before")
    @classmethod
    def coerce_settle_duration(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        if not is_int_like(value):
            logger.debug(
                f"Invalid settle duration {value!r}, using {DEFAULT_SETTLE_DURATION}"
            )
            return DEFAULT_SETTLE_DURATION
        return int(value)

    @field_validator("use_view_transition", mode="before")
    @classmethod
    def coerce_view_transition(cls, value: Any) -> bool:
        return _flag(value)


class MergeSignalsOptions(EventOptions):
    """Options for ``datastar-merge-signals``."""

    only_if_missing: bool = DEFAULT_ONLY_IF_MISSING

    @field_validator("only_if_missing", mode="before")
    @classmethod
    def coerce_only_if_missing(cls, value: Any) -> bool:
        return _flag(value)


def _attribute_value(value: Any) -> str:
    if isinstance(value, bool):
        return bool_token(value)
    return str(value)


class ExecuteScriptOptions(EventOptions):
    """
    Options for ``datastar-execute-script``.

    ``attributes`` 接受 mapping（例如 ``{"type": "module"}``），
    也接受由 mapping 或布林屬性字串組成的序列（例如 ``[{"type": "module"}, "defer"]``）。
    """

    auto_remove: bool = DEFAULT_AUTO_REMOVE
    attributes: tuple[tuple[str, str], ...] = ()

    @field_validator("auto_remove", mode="before")
    @classmethod
    def coerce_auto_remove(cls, value: Any) -> bool:
        return _flag(value)

    @field_validator("attributes", mode="before")
    @classmethod
    def coerce_attributes(cls, value: Any) -> tuple[tuple[str, str], ...]:
        pairs: list[tuple[str, str]] = []
        if isinstance(value, Mapping):
            pairs.extend((str(k), _attribute_value(v)) for k, v in value.items())
        elif is_array_like(value):
            for item in value:
                if isinstance(item, Mapping):
                    pairs.extend((str(k), _attribute_value(v)) for k, v in item.items())
                elif isinstance(item, str) and item:
                    # 布林屬性，只輸出名稱
                    pairs.append((item, ""))
                elif is_array_like(item) and len(item) == 2:
                    pairs.append((str(item[0]), _attribute_value(item[1])))

        kept = tuple(
            (name, val)
            for name, val in pairs
            if not has_line_break(name) and not has_line_break(val)
        )
        if len(kept) < len(pairs):
            logger.debug("Dropping script attributes containing a line break")
        return kept
