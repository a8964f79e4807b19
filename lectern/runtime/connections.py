from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

from fastapi import WebSocket
from fastapi.encoders import jsonable_encoder


logger = logging.getLogger(__name__)


def _new_connection_id() -> str:
    return uuid.uuid4().hex


@dataclass(eq=False)
class Connection:
    """
    One client's duplex channel.

    emit() never awaits: the frame is encoded right away (so later state changes
    cannot leak into it) and queued on the outbox. pump() is the only place that
    writes to the socket.
    """
    id: str = field(default_factory=_new_connection_id)
    outbox_maxsize: int = 0
    closed: bool = False
    outbox: asyncio.Queue[dict] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.outbox = asyncio.Queue(maxsize=self.outbox_maxsize)

    def emit(self, event: str, data: Any = None) -> bool:
        if self.closed:
            return False

        frame = {"event": event, "data": jsonable_encoder(data)}
        try:
            self.outbox.put_nowait(frame)
        except asyncio.QueueFull:
            logger.warning("Outbox full for connection %s, dropping %r", self.id, event)
            return False
        return True

    def drain(self) -> list[dict]:
        """Pop every frame still waiting in the outbox."""
        frames = []
        while not self.outbox.empty():
            frames.append(self.outbox.get_nowait())
        return frames

    def close(self) -> None:
        self.closed = True

    async def pump(self, websocket: WebSocket) -> None:
        """Writer loop: forward queued frames to the socket until a send fails."""
        while True:
            frame = await self.outbox.get()
            try:
                await websocket.send_json(frame)
            except Exception as e:
                # the read loop sees the disconnect and reconciles the rooms
                logger.warning("Send to connection %s failed: %s", self.id, e)
                self.closed = True
                return


class ConnectionRegistry:
    """Live connections keyed by their opaque id."""

    def __init__(self) -> None:
        self._connections: Dict[str, Connection] = {}

    def register(self, conn: Connection) -> Connection:
        self._connections[conn.id] = conn
        return conn

    def unregister(self, connection_id: str) -> Connection | None:
        return self._connections.pop(connection_id, None)

    def get(self, connection_id: str) -> Connection | None:
        return self._connections.get(connection_id)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._connections

    def __len__(self) -> int:
        return len(self._connections)

    def __iter__(self) -> Iterator[Connection]:
        return iter(list(self._connections.values()))
