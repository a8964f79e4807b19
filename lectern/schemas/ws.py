from __future__ import annotations

import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from lectern.core.errors import InvalidPayload


# Wire frames are {"event": "<name>", "data": <payload>}; payload keys are camelCase.

CHAT_MESSAGE = "chat message"
JOIN_LIVE_CLASS = "join live class"
LEAVE_LIVE_CLASS = "leave live class"
LIVE_CLASS_ATTENDEES = "live class attendees"
SCREEN_SHARE = "screen share"
STUDENT_WANTS_STREAM = "student wants stream"
TEACHER_SIGNAL = "teacher signal"
STUDENT_SIGNAL = "student signal"
CONNECTED = "connected"
ERROR = "error"


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ---- client -> server ----

class LiveClassUserIn(_Payload):
    live_class_id: str = Field(..., alias="liveClassId", min_length=1)
    user: str = Field(..., min_length=1, max_length=100)


class ScreenShareIn(_Payload):
    live_class_id: str = Field(..., alias="liveClassId", min_length=1)
    sharing: bool


class StudentWantsStreamIn(_Payload):
    live_class_id: str = Field(..., alias="liveClassId", min_length=1)
    # defaults to the sender's own socket id
    student_socket_id: str | None = Field(None, alias="studentSocketId", min_length=1)


class TeacherSignalIn(_Payload):
    student_socket_id: str = Field(..., alias="studentSocketId", min_length=1)
    signal: Any = Field(...)


class StudentSignalIn(_Payload):
    live_class_id: str = Field(..., alias="liveClassId", min_length=1)
    signal: Any = Field(...)


class ChatMessageEvent(BaseModel):
    event: Literal["chat message"]
    data: Any = None


class JoinLiveClassEvent(BaseModel):
    event: Literal["join live class"]
    data: LiveClassUserIn


class LeaveLiveClassEvent(BaseModel):
    event: Literal["leave live class"]
    data: LiveClassUserIn


class ScreenShareEvent(BaseModel):
    event: Literal["screen share"]
    data: ScreenShareIn


class StudentWantsStreamEvent(BaseModel):
    event: Literal["student wants stream"]
    data: StudentWantsStreamIn


class TeacherSignalEvent(BaseModel):
    event: Literal["teacher signal"]
    data: TeacherSignalIn


class StudentSignalEvent(BaseModel):
    event: Literal["student signal"]
    data: StudentSignalIn


ClientToServer = Annotated[
    Union[
        ChatMessageEvent,
        JoinLiveClassEvent,
        LeaveLiveClassEvent,
        ScreenShareEvent,
        StudentWantsStreamEvent,
        TeacherSignalEvent,
        StudentSignalEvent,
    ],
    Field(discriminator="event"),
]

_client_event_adapter: TypeAdapter[ClientToServer] = TypeAdapter(ClientToServer)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def parse_client_event(raw: str) -> ClientToServer:
    """Parse one text frame into a typed client event or raise InvalidPayload."""
    try:
        frame = json.loads(raw)
    except json.JSONDecodeError:
        raise InvalidPayload("frame is not valid JSON")

    if not isinstance(frame, dict):
        raise InvalidPayload("frame must be a JSON object")

    event = frame.get("event")
    event = event if isinstance(event, str) else None
    try:
        return _client_event_adapter.validate_python(frame)
    except ValidationError as e:
        raise InvalidPayload(_describe(e), event=event)


# ---- server -> clients ----

class ConnectedOut(_Payload):
    socket_id: str = Field(..., alias="socketId")


class ScreenShareOut(_Payload):
    sharing: bool


class StudentWantsStreamOut(_Payload):
    student_socket_id: str = Field(..., alias="studentSocketId")


class TeacherSignalOut(_Payload):
    signal: Any


class StudentSignalOut(_Payload):
    signal: Any
    student_socket_id: str = Field(..., alias="studentSocketId")


class ErrorOut(_Payload):
    code: str
    detail: str
    event: str | None = None
