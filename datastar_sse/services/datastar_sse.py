"""Datastar SSE 事件編碼服務.

每個事件對應一個 classmethod，將 payload 與 options 轉成一個完整的 SSE frame。
沒有可輸出的內容時回傳空字串，不拋出例外。

Usage:
    frame = DatastarSSE.merge_fragments(
        '<div id="name">Bob</div>',
        {"selector": "#name", "merge_mode": MERGEMODE_OUTER},
    )

    # frame:
    event: datastar-merge-fragments
    data: selector #name
    data: mergeMode outer
    data: fragments <div id="name">Bob</div>
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Sequence, Union

from ..models.event_types import (
    EventType,
    lookup_event,
    is_recognized_event,
    is_recognized_merge_mode,
)
from ..models.options import (
    EventOptions,
    ExecuteScriptOptions,
    MergeFragmentsOptions,
    MergeSignalsOptions,
    RemoveFragmentsOptions,
    RemoveSignalsOptions,
)
from ..models.payload import TextRef
from ..utils.json_codec import bool_token, encode_json
from ..utils.predicates import is_array_like, is_scalar_ref
from ..utils.sse import format_sse_event, has_line_break, split_lines, sse_headers


logger = logging.getLogger(__name__)


DataField = tuple[str, Any]
TextPayload = Union[str, TextRef, Sequence[Union[str, TextRef]], None]


def flatten_text(payload: TextPayload) -> list[str]:
    """
    將單一或多個文字區塊展開成逐行列表.

    規則：
    1. None 或空值回傳空列表
    2. 單一值視為只有一個元素的序列
    3. TextRef 先取出其文字
    4. 每個區塊依 ``\\n`` / ``\\r\\n`` / ``\\r`` 拆行，去除尾端空行

    Examples:
        >>> flatten_text("<p>a</p>\\n<p>b</p>")
        ['<p>a</p>', '<p>b</p>']
        >>> flatten_text(["x", TextRef("y\\r\\nz")])
        ['x', 'y', 'z']
        >>> flatten_text([])
        []
    """
    if payload is None:
        return []
    items = list(payload) if is_array_like(payload) else [payload]

    lines: list[str] = []
    for item in items:
        if is_scalar_ref(item):
            item = item.text
        if item is None or item == "":
            continue
        block = split_lines(str(item))
        while block and block[-1] == "":
            block.pop()
        lines.extend(block)
    return lines


def _is_empty_signals(signals: Any) -> bool:
    if signals is None:
        return True
    if isinstance(signals, (str, bytes, Mapping, list, tuple, set)):
        return len(signals) == 0
    return False


class DatastarSSE:
    """
    Datastar Server-Sent Event 產生器.

    All methods are stateless classmethods and return the frame text, or an
    empty string when there is nothing to emit.
    """

    @classmethod
    def headers(cls) -> tuple[tuple[str, str], ...]:
        """Recommended response headers for Datastar SSE responses."""
        return sse_headers()

    @classmethod
    def is_recognized_event(cls, name: Any) -> bool:
        return is_recognized_event(name)

    @classmethod
    def is_recognized_merge_mode(cls, name: Any) -> bool:
        return is_recognized_merge_mode(name)

    @classmethod
    def merge_fragments(cls, fragment: TextPayload, options: Any = None) -> str:
        """
        datastar-merge-fragments: merge one or more HTML fragments into the DOM.

        Args:
            fragment: HTML text, a TextRef, or a sequence of either
            options: selector, merge_mode, settle_duration, use_view_transition

        Returns:
            SSE frame text, or "" when there is no fragment
        """
        lines = flatten_text(fragment)
        if not lines:
            logger.debug("merge_fragments: empty fragment, nothing to emit")
            return ""

        opts = MergeFragmentsOptions.from_options(options)
        data: list[DataField] = []
        if opts.selector is not None:
            data.append(("selector", opts.selector))
        if opts.merge_mode is not None:
            data.append(("mergeMode", opts.merge_mode))
        if opts.settle_duration is not None:
            data.append(("settleDuration", opts.settle_duration))
        if opts.use_view_transition:
            data.append(("useViewTransition", bool_token(opts.use_view_transition)))
        data.extend(("fragments", line) for line in lines)

        return cls._emit(EventType.MERGE_FRAGMENTS, data, opts)

    @classmethod
    def merge_signals(cls, signals: Any, options: Any = None) -> str:
        """
        datastar-merge-signals: update client signals.

        Structured values are JSON-encoded; text is sent as one ``signals``
        field, with any line breaks folded into spaces. Values the JSON
        encoder cannot handle yield "".
        """
        if _is_empty_signals(signals):
            logger.debug("merge_signals: empty signals, nothing to emit")
            return ""

        opts = MergeSignalsOptions.from_options(options)
        if isinstance(signals, bytes):
            signals = signals.decode("utf-8")
        if isinstance(signals, str):
            # 換行在 JSON / data-signals 字面值的 token 之間等同空白
            signals = " ".join(split_lines(signals))
        else:
            try:
                signals = encode_json(signals)
            except (TypeError, ValueError) as e:
                logger.debug(f"merge_signals: cannot encode signals ({e}), nothing to emit")
                return ""

        data: list[DataField] = [
            ("onlyIfMissing", bool_token(opts.only_if_missing)),
            ("signals", signals),
        ]
        return cls._emit(EventType.MERGE_SIGNALS, data, opts)

    @classmethod
    def remove_fragments(cls, selector: Optional[str], options: Any = None) -> str:
        """datastar-remove-fragments: remove elements matching ``selector``."""
        if not selector or not isinstance(selector, str) or has_line_break(selector):
            logger.debug("remove_fragments: no usable selector, nothing to emit")
            return ""

        opts = RemoveFragmentsOptions.from_options(options)
        return cls._emit(EventType.REMOVE_FRAGMENTS, [("selector", selector)], opts)

    @classmethod
    def remove_signals(cls, *paths: Union[str, Sequence[str]], options: Any = None) -> str:
        """
        datastar-remove-signals: remove signals by path.

        Accepts any mix of path strings and sequences of path strings:

            DatastarSSE.remove_signals("user.name", ["cart.items", "cart.total"])
        """
        data: list[DataField] = []
        for path in paths:
            candidates = path if is_array_like(path) else [path]
            data.extend(
                ("paths", p)
                for p in candidates
                if p and isinstance(p, str) and not has_line_break(p)
            )

        if not data:
            logger.debug("remove_signals: no paths, nothing to emit")
            return ""

        opts = RemoveSignalsOptions.from_options(options)
        return cls._emit(EventType.REMOVE_SIGNALS, data, opts)

    @classmethod
    def execute_script(cls, script: TextPayload, options: Any = None) -> str:
        """
        datastar-execute-script: run JavaScript in the browser.

        Args:
            script: script text, a TextRef, or a sequence of either
            options: auto_remove, attributes

        Returns:
            SSE frame text, or "" when there is no script
        """
        lines = flatten_text(script)
        if not lines:
            logger.debug("execute_script: empty script, nothing to emit")
            return ""

        opts = ExecuteScriptOptions.from_options(options)
        data: list[DataField] = [("autoRemove", bool_token(opts.auto_remove))]
        for name, value in opts.attributes:
            data.append(("attributes", f"{name} {value}" if value != "" else name))
        data.extend(("script", line) for line in lines)

        return cls._emit(EventType.EXECUTE_SCRIPT, data, opts)

    @classmethod
    def event(cls, event_type: Any, payload: Any, options: Any = None) -> str:
        """
        Encode ``payload`` as the event named ``event_type``.

        ``event_type`` may be an EventType, the wire name, or the constant
        name (``DATASTAR_MERGE_FRAGMENTS``). Unknown names yield "".
        """
        event = lookup_event(event_type)
        if event is None:
            logger.debug(f"Unrecognized event {event_type!r}")
            return ""

        if event is EventType.MERGE_FRAGMENTS:
            return cls.merge_fragments(payload, options)
        if event is EventType.REMOVE_FRAGMENTS:
            return cls.remove_fragments(payload, options)
        if event is EventType.MERGE_SIGNALS:
            return cls.merge_signals(payload, options)
        if event is EventType.REMOVE_SIGNALS:
            return cls.remove_signals(payload, options=options)
        return cls.execute_script(payload, options)

    @classmethod
    def _emit(cls, event: EventType, data: list[DataField], opts: EventOptions) -> str:
        return cls._datastar_event(
            event.value,
            data,
            event_id=opts.event_id,
            retry=opts.retry_duration,
        )

    @classmethod
    def _datastar_event(
        cls,
        event: Any,
        data: Iterable[DataField],
        event_id: Optional[str] = None,
        retry: Optional[int] = None,
    ) -> str:
        """
        Serialize ordered data fields into one SSE frame.

        Each field is rendered as ``"<name> <value>"``, one ``data:`` line per
        field. Unrecognized events yield "".
        """
        if not event or not is_recognized_event(event):
            logger.debug(f"Refusing to serialize unrecognized event {event!r}")
            return ""

        event_name = lookup_event(event).value
        event_data = "\n".join(f"{name} {value}" for name, value in data)
        return format_sse_event(event_name, event_data, event_id=event_id, retry=retry)
