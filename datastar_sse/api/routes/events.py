"""Datastar event endpoints.

將 JSON 請求轉成 Datastar SSE frame 回傳，方便非 Python 的服務或除錯工具使用。
"""

import asyncio
import logging
from typing import AsyncIterator

from fastapi import APIRouter, Response

from ...api.dependencies import EncoderDep, EventDep, resolve_event
from ...api.streaming import DatastarStreamingResponse
from ...config import settings
from ...models.responses import EventRequest, HeaderPair, StreamRequest
from ...utils import ErrorCode, log_error, raise_error


logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.api_prefix}/events", tags=["Events"])


@router.get("/headers", response_model=list[HeaderPair])
async def get_headers(encoder: EncoderDep) -> list[HeaderPair]:
    """Recommended response headers for Datastar SSE responses."""
    return [HeaderPair(name=name, value=value) for name, value in encoder.headers()]


@router.post("/stream")
async def stream_events(request: StreamRequest, encoder: EncoderDep) -> DatastarStreamingResponse:
    """
    Stream several events as one SSE response.

    Event names are checked before streaming starts so that a bad batch is
    rejected with an error body instead of a truncated stream.

    Raises:
        APIError: If the batch is empty or names an unknown event
    """
    if not request.events:
        raise_error(
            ErrorCode.INVALID_REQUEST,
            "Stream request contains no events",
            status_code=400,
        )

    batch = [(resolve_event(item.event), item) for item in request.events]
    logger.info(f"Streaming {len(batch)} Datastar events")

    async def frames() -> AsyncIterator[str]:
        for event, item in batch:
            try:
                yield encoder.event(event, item.payload, item.options)
            except Exception as e:
                log_error(e, context=f"Stream {event.value}")
                raise
            await asyncio.sleep(0)

    return DatastarStreamingResponse(frames(), heartbeat=settings.heartbeat_interval)


@router.post("/{event_name}")
async def render_event(event: EventDep, request: EventRequest, encoder: EncoderDep) -> Response:
    """
    Render one event as an SSE frame.

    Raises:
        APIError: If the encoder has nothing to emit for the payload
    """
    frame = encoder.event(event, request.payload, request.options)
    if not frame:
        raise_error(
            ErrorCode.EMPTY_PAYLOAD,
            f"Nothing to emit for {event.value}",
            status_code=422,
        )

    logger.debug(f"Rendered {event.value} ({len(frame)} bytes)")
    return Response(
        content=frame,
        headers=dict(encoder.headers()),
        media_type="text/event-stream",
    )
