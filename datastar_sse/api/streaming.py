"""Streaming response for Datastar SSE frames."""

import asyncio
import logging
from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, Optional, Union

from fastapi.responses import StreamingResponse

from ..utils.sse import format_comment, sse_headers


logger = logging.getLogger(__name__)


FrameSource = Union[Iterable[str], AsyncIterable[str]]


async def with_heartbeat(frames: AsyncIterable[str], interval: float) -> AsyncIterator[str]:
    """
    Yield ``frames`` in order, inserting a comment frame whenever the source
    stays silent for ``interval`` seconds. Empty frames are dropped.
    """
    iterator = frames.__aiter__()
    pending: Optional[asyncio.Future] = None
    try:
        while True:
            if pending is None:
                pending = asyncio.ensure_future(iterator.__anext__())
            done, _ = await asyncio.wait({pending}, timeout=interval)
            if not done:
                yield format_comment("ping")
                continue
            try:
                frame = pending.result()
            except StopAsyncIteration:
                break
            pending = None
            if frame:
                yield frame
    finally:
        if pending is not None and not pending.done():
            pending.cancel()


def _drop_empty(frames: Iterable[str]) -> Iterator[str]:
    return (frame for frame in frames if frame)


async def _drop_empty_async(frames: AsyncIterable[str]) -> AsyncIterator[str]:
    async for frame in frames:
        if frame:
            yield frame


class DatastarStreamingResponse(StreamingResponse):
    """
    Streams Datastar SSE frames with the recommended headers.

    Frames are written in the order the source yields them; the client
    applies them in receipt order.
    """

    def __init__(
        self,
        frames: FrameSource,
        status_code: int = 200,
        heartbeat: Optional[float] = None,
    ):
        if hasattr(frames, "__aiter__"):
            if heartbeat:
                content = with_heartbeat(frames, heartbeat)
            else:
                content = _drop_empty_async(frames)
        else:
            content = _drop_empty(frames)
        super().__init__(
            content=content,
            status_code=status_code,
            headers=dict(sse_headers()),
            media_type="text/event-stream",
        )
