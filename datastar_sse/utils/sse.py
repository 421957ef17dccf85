"""SSE (Server-Sent Events) 格式化工具."""

import re
from functools import lru_cache
from typing import Optional

from ..config import settings


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """
    Split text on ``\\r\\n``, ``\\r`` and ``\\n`` boundaries.

    SSE 解析器將單獨的 CR 也視為換行，因此一併拆開。
    """
    return _LINE_BREAK.split(text)


def has_line_break(value: str) -> bool:
    """Whether ``value`` would end an SSE line early."""
    return "\n" in value or "\r" in value


def _check_single_line(name: str, value: str) -> None:
    if has_line_break(value):
        raise ValueError(f"SSE {name} must not contain line breaks: {value!r}")


def format_sse_event(
    event_type: str,
    data: str,
    event_id: Optional[str] = None,
    retry: Optional[int] = None,
    comment: Optional[str] = None,
) -> str:
    """
    格式化 SSE 事件.

    Args:
        event_type: 事件類型 (e.g. datastar-merge-fragments)
        data: 事件資料，多行文字會拆成多個 data: 行
        event_id: 可選的事件 ID
        retry: 可選的重連等待時間（毫秒）
        comment: 可選的註解行

    Returns:
        SSE 格式的字串，以雙換行結尾

    Raises:
        ValueError: event_type、event_id 或 comment 含有換行
    """
    lines = []

    if comment is not None:
        _check_single_line("comment", comment)
        lines.append(f": {comment}")

    _check_single_line("event", event_type)
    lines.append(f"event: {event_type}")

    if event_id is not None:
        _check_single_line("id", event_id)
        lines.append(f"id: {event_id}")

    if retry is not None:
        lines.append(f"retry: {int(retry)}")

    for line in split_lines(data):
        lines.append(f"data: {line}")

    lines.append("")  # SSE 需要空行結尾

    return "\n".join(lines) + "\n"


def format_comment(text: str = "") -> str:
    """格式化註解事件，可作為 keep-alive heartbeat."""
    _check_single_line("comment", text)
    return f": {text}\n\n"


@lru_cache(maxsize=None)
def sse_headers() -> tuple[tuple[str, str], ...]:
    """
    Recommended HTTP response headers for a Datastar SSE response.

    Built once; the returned tuple is shared by every caller.
    """
    return (
        ("Content-Type", "text/event-stream"),
        ("Cache-Control", "no-cache"),
        ("Connection", "keep-alive"),
        ("Keep-Alive", settings.keep_alive_header),
    )
