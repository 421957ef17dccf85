"""Tests for the SSE streaming response helpers."""

import asyncio

from datastar_sse.api.streaming import DatastarStreamingResponse, with_heartbeat


async def _collect(source):
    return [frame async for frame in source]


async def _slow_frames():
    yield "event: a\n\n"
    await asyncio.sleep(0.2)
    yield "event: b\n\n"


async def _fast_frames():
    for frame in ["event: a\n\n", "", "event: b\n\n"]:
        yield frame


class TestWithHeartbeat:

    def test_heartbeat_is_sent_while_source_is_silent(self):
        frames = asyncio.run(_collect(with_heartbeat(_slow_frames(), interval=0.05)))

        assert frames[0] == "event: a\n\n"
        assert frames[-1] == "event: b\n\n"
        assert ": ping\n\n" in frames[1:-1]

    def test_no_heartbeat_when_source_is_fast(self):
        frames = asyncio.run(_collect(with_heartbeat(_fast_frames(), interval=5)))
        assert frames == ["event: a\n\n", "event: b\n\n"]


class TestDatastarStreamingResponse:

    def test_headers_and_media_type(self):
        response = DatastarStreamingResponse(["event: a\n\n"])

        assert response.media_type == "text/event-stream"
        assert response.headers["content-type"] == "text/event-stream"
        assert response.headers["cache-control"] == "no-cache"
        assert response.headers["keep-alive"] == "timeout=300, max=100000"
