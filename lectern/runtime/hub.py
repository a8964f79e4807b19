from __future__ import annotations

import logging
from typing import Any

from lectern.core.errors import InvalidPayload, UnknownLiveClass
from lectern.runtime.connections import Connection, ConnectionRegistry
from lectern.runtime.rooms import RoomMembershipTable, ScreenShare
from lectern.schemas import ws
from lectern.services.live_class_service import LiveClassDirectory


class LiveClassHub:
    """
    Real-time live class layer: presence, screen-share signaling and chat.

    One instance per running app. Every handler applies its mutation and queues
    the resulting emissions without awaiting in between, so on a single event
    loop each inbound event is atomic and attendee snapshots leave in mutation
    order. Only the optional live class lookup awaits, and it runs first.
    """

    def __init__(
        self,
        *,
        directory: LiveClassDirectory | None = None,
        sweep_joined_names: bool = True,
        outbox_maxsize: int = 0,
    ):
        self.directory = directory
        self.outbox_maxsize = outbox_maxsize
        self.connections = ConnectionRegistry()
        self.rooms = RoomMembershipTable(sweep_joined_names=sweep_joined_names)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # ---- connection lifecycle ----

    def connect(self) -> Connection:
        conn = self.connections.register(Connection(outbox_maxsize=self.outbox_maxsize))
        conn.emit(ws.CONNECTED, ws.ConnectedOut(socket_id=conn.id))
        self.logger.info("Connection %s opened (%d live)", conn.id, len(self.connections))
        return conn

    def disconnect(self, connection_id: str) -> list[str]:
        """
        Sweep a closing connection out of every room and refresh their attendee
        lists. Must run before the connection is unregistered; calling it again
        for the same id is a no-op.
        """
        affected = self.rooms.remove_connection(connection_id)
        for room_id in affected:
            self.notify(room_id)

        for room_id in self.rooms.room_ids():
            state = self.rooms.get(room_id)
            screen = state.screen if state else None
            if screen and screen.sharing and screen.presenter_id == connection_id:
                self.rooms.set_sharing(room_id, connection_id, False)
                self._emit_to_room(room_id, ws.SCREEN_SHARE, ws.ScreenShareOut(sharing=False))

        conn = self.connections.unregister(connection_id)
        if conn is not None:
            conn.close()
            self.logger.info("Connection %s closed (%d live)", connection_id, len(self.connections))
        return affected

    # ---- emission ----

    def _emit_to_room(self, room_id: str, event: str, data: Any, *, exclude: str | None = None) -> int:
        sent = 0
        for connection_id in self.rooms.members(room_id):
            if connection_id == exclude:
                continue
            conn = self.connections.get(connection_id)
            if conn is not None and conn.emit(event, data):
                sent += 1
        return sent

    def notify(self, room_id: str) -> None:
        """Send the room's full attendee list to everyone in the room."""
        self._emit_to_room(room_id, ws.LIVE_CLASS_ATTENDEES, self.rooms.attendees(room_id))

    # ---- presence ----

    def join(self, conn: Connection, live_class_id: str, user: str) -> None:
        self.rooms.join(live_class_id, conn.id, user)
        self.notify(live_class_id)

    def leave(self, conn: Connection, live_class_id: str, user: str) -> None:
        if self.rooms.leave(live_class_id, conn.id, user) is not None:
            self.notify(live_class_id)

    # ---- signaling ----

    def set_sharing(self, conn: Connection, live_class_id: str, sharing: bool) -> ScreenShare:
        screen = self.rooms.set_sharing(live_class_id, conn.id, sharing)
        self._emit_to_room(live_class_id, ws.SCREEN_SHARE, ws.ScreenShareOut(sharing=sharing))
        return screen

    def viewer_wants_stream(self, conn: Connection, live_class_id: str, student_socket_id: str | None = None) -> None:
        out = ws.StudentWantsStreamOut(student_socket_id=student_socket_id or conn.id)
        self._emit_to_room(live_class_id, ws.STUDENT_WANTS_STREAM, out, exclude=conn.id)

    def presenter_signal(self, conn: Connection, target_id: str, signal: Any) -> bool:
        target = self.connections.get(target_id)
        if target is None:
            self.logger.debug("Dropping teacher signal from %s: %s is gone", conn.id, target_id)
            return False
        return target.emit(ws.TEACHER_SIGNAL, ws.TeacherSignalOut(signal=signal))

    def viewer_signal(self, conn: Connection, live_class_id: str, signal: Any) -> None:
        out = ws.StudentSignalOut(signal=signal, student_socket_id=conn.id)
        self._emit_to_room(live_class_id, ws.STUDENT_SIGNAL, out, exclude=conn.id)

    # ---- chat ----

    def chat(self, conn: Connection, message: Any) -> None:
        for other in self.connections:
            other.emit(ws.CHAT_MESSAGE, message)

    # ---- inbound dispatch ----

    async def _ensure_live_class(self, live_class_id: str, event: str) -> None:
        if self.directory is None:
            return
        if not await self.directory.exists(live_class_id):
            raise UnknownLiveClass(live_class_id, event=event)

    async def dispatch(self, conn: Connection, message: ws.ClientToServer) -> None:
        """Apply one parsed client event."""
        data = message.data

        if isinstance(message, ws.ChatMessageEvent):
            self.chat(conn, data)
        elif isinstance(message, ws.JoinLiveClassEvent):
            await self._ensure_live_class(data.live_class_id, message.event)
            self.join(conn, data.live_class_id, data.user)
        elif isinstance(message, ws.LeaveLiveClassEvent):
            self.leave(conn, data.live_class_id, data.user)
        elif isinstance(message, ws.ScreenShareEvent):
            await self._ensure_live_class(data.live_class_id, message.event)
            self.set_sharing(conn, data.live_class_id, data.sharing)
        elif isinstance(message, ws.StudentWantsStreamEvent):
            self.viewer_wants_stream(conn, data.live_class_id, data.student_socket_id)
        elif isinstance(message, ws.TeacherSignalEvent):
            self.presenter_signal(conn, data.student_socket_id, data.signal)
        elif isinstance(message, ws.StudentSignalEvent):
            self.viewer_signal(conn, data.live_class_id, data.signal)
        else:
            raise InvalidPayload("unsupported event", event=getattr(message, "event", None))

    async def handle_frame(self, conn: Connection, raw: str) -> None:
        await self.dispatch(conn, ws.parse_client_event(raw))
