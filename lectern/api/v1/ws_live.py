from __future__ import annotations

import asyncio
import contextlib
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from lectern.api.deps import get_hub
from lectern.core import settings
from lectern.core.errors import InvalidPayload, LecternError
from lectern.runtime.hub import LiveClassHub
from lectern.schemas import ws


router = APIRouter(prefix="/live", tags=["live-ws"])

logger = logging.getLogger(__name__)


@router.websocket("/ws")
async def live_ws(websocket: WebSocket, hub: LiveClassHub = Depends(get_hub)):
    # No authentication on the socket: any client may join any live class.
    await websocket.accept()

    conn = hub.connect()
    writer = asyncio.create_task(conn.pump(websocket))

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))

            try:
                raw = message.get("text")
                if raw is None:
                    raise InvalidPayload("frame must be text")
                await hub.handle_frame(conn, raw)
            except LecternError as e:
                logger.info("Rejected frame from %s (%s): %s", conn.id, e.code, e.detail)
                if settings.REJECT_INVALID_PAYLOADS:
                    conn.emit(ws.ERROR, ws.ErrorOut(code=e.code, detail=e.detail, event=e.event))

    except WebSocketDisconnect:
        pass
    finally:
        # rooms are swept while the connection is still registered
        hub.disconnect(conn.id)

        writer.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await writer
