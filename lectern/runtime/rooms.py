from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set


@dataclass
class ScreenShare:
    sharing: bool
    presenter_id: str


@dataclass
class RoomState:
    # connection ids that receive room-scoped emissions
    members: Set[str] = field(default_factory=set)
    # display names, dict used as an insertion-ordered set
    attendees: Dict[str, None] = field(default_factory=dict)
    # connection id -> names it joined with
    joined_names: Dict[str, Set[str]] = field(default_factory=dict)
    screen: ScreenShare | None = None

    def attendee_list(self) -> list[str]:
        return list(self.attendees)


class RoomMembershipTable:
    """
    Per live class presence: who receives room broadcasts and which display
    names are shown as attending.

    The two are tracked separately. A name stays in the attendee set until it is
    removed by name (leave) or swept with the connection that joined it.
    Rooms are created on first use and kept for the table's lifetime.
    """

    def __init__(self, *, sweep_joined_names: bool = True):
        self.sweep_joined_names = sweep_joined_names
        self._rooms: Dict[str, RoomState] = {}

    def _room(self, room_id: str) -> RoomState:
        state = self._rooms.get(room_id)
        if state is None:
            state = RoomState()
            self._rooms[room_id] = state
        return state

    def get(self, room_id: str) -> RoomState | None:
        return self._rooms.get(room_id)

    def room_ids(self) -> list[str]:
        return list(self._rooms)

    def join(self, room_id: str, connection_id: str, display_name: str) -> RoomState:
        state = self._room(room_id)
        state.members.add(connection_id)
        state.attendees[display_name] = None
        state.joined_names.setdefault(connection_id, set()).add(display_name)
        return state

    def leave(self, room_id: str, connection_id: str, display_name: str) -> RoomState | None:
        state = self._rooms.get(room_id)
        if state is None:
            return None

        state.members.discard(connection_id)
        state.attendees.pop(display_name, None)

        names = state.joined_names.get(connection_id)
        if names is not None:
            names.discard(display_name)
            if not names:
                del state.joined_names[connection_id]
        return state

    def remove_connection(self, connection_id: str) -> list[str]:
        """Drop a connection from every room; returns the rooms that changed."""
        affected: list[str] = []
        for room_id, state in self._rooms.items():
            was_member = connection_id in state.members
            state.members.discard(connection_id)

            before = len(state.attendees)
            # attendee entries keyed by the connection id itself
            state.attendees.pop(connection_id, None)

            names = state.joined_names.pop(connection_id, set())
            if self.sweep_joined_names:
                still_held = set()
                for other_id in state.members:
                    still_held |= state.joined_names.get(other_id, set())
                for name in names - still_held:
                    state.attendees.pop(name, None)

            if was_member or len(state.attendees) != before:
                affected.append(room_id)
        return affected

    def set_sharing(self, room_id: str, connection_id: str, sharing: bool) -> ScreenShare:
        state = self._room(room_id)
        state.screen = ScreenShare(sharing=sharing, presenter_id=connection_id)
        return state.screen

    def attendees(self, room_id: str) -> list[str]:
        state = self._rooms.get(room_id)
        return state.attendee_list() if state else []

    def members(self, room_id: str) -> list[str]:
        state = self._rooms.get(room_id)
        return list(state.members) if state else []

    def rooms_of(self, connection_id: str) -> list[str]:
        return [room_id for room_id, state in self._rooms.items() if connection_id in state.members]
