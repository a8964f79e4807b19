from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from lectern.api.deps import get_hub
from lectern.runtime.hub import LiveClassHub
from lectern.schemas.live_class import RoomStateListOut, RoomStateOut

router = APIRouter()


def _build_room_state_out(hub: LiveClassHub, live_class_id: str) -> RoomStateOut:
    state = hub.rooms.get(live_class_id)
    screen = state.screen if state else None
    return RoomStateOut(
        live_class_id=live_class_id,
        attendees=hub.rooms.attendees(live_class_id),
        connection_count=len(hub.rooms.members(live_class_id)),
        sharing=bool(screen and screen.sharing),
        presenter_socket_id=screen.presenter_id if screen else None,
    )


@router.get("", response_model=RoomStateListOut)
async def list_live_classes(hub: LiveClassHub = Depends(get_hub)) -> RoomStateListOut:
    return RoomStateListOut(
        live_classes=[_build_room_state_out(hub, room_id) for room_id in hub.rooms.room_ids()]
    )


@router.get("/{live_class_id}", response_model=RoomStateOut)
async def get_live_class_state(
    live_class_id: str,
    hub: LiveClassHub = Depends(get_hub),
) -> RoomStateOut:
    if hub.rooms.get(live_class_id) is None:
        raise HTTPException(status_code=404, detail="live class not active")
    return _build_room_state_out(hub, live_class_id)
