from __future__ import annotations

from pydantic import BaseModel
from typing import List


class RoomStateOut(BaseModel):
    live_class_id: str
    attendees: List[str] = []
    connection_count: int = 0
    sharing: bool = False
    presenter_socket_id: str | None = None


class RoomStateListOut(BaseModel):
    live_classes: List[RoomStateOut]
