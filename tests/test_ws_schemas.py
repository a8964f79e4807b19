"""Tests for client event parsing."""
import json

import pytest

from lectern.core.errors import InvalidPayload
from lectern.schemas import ws


def _raw(event, data):
    return json.dumps({"event": event, "data": data})


def test_parse_join_uses_camel_case_aliases():
    msg = ws.parse_client_event(_raw("join live class", {"liveClassId": "lc1", "user": "Alice"}))

    assert isinstance(msg, ws.JoinLiveClassEvent)
    assert msg.data.live_class_id == "lc1"
    assert msg.data.user == "Alice"


def test_parse_chat_accepts_any_shape():
    msg = ws.parse_client_event(_raw("chat message", {"text": "hi", "nested": [1, 2]}))
    assert isinstance(msg, ws.ChatMessageEvent)
    assert msg.data == {"text": "hi", "nested": [1, 2]}

    msg = ws.parse_client_event(_raw("chat message", "plain text"))
    assert msg.data == "plain text"


def test_parse_signals_keep_payload_opaque():
    signal = {"type": "offer", "sdp": "v=0\r\n", "extra": {"x": None}}

    teacher = ws.parse_client_event(_raw("teacher signal", {"studentSocketId": "abc", "signal": signal}))
    student = ws.parse_client_event(_raw("student signal", {"liveClassId": "lc1", "signal": signal}))

    assert teacher.data.signal == signal
    assert teacher.data.student_socket_id == "abc"
    assert student.data.signal == signal


def test_student_wants_stream_socket_id_is_optional():
    msg = ws.parse_client_event(_raw("student wants stream", {"liveClassId": "lc1"}))
    assert msg.data.student_socket_id is None


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[1, 2, 3]",
        json.dumps({"data": {}}),
        _raw("dance", {}),
    ],
)
def test_unparseable_frames_raise_invalid_payload(raw):
    with pytest.raises(InvalidPayload):
        ws.parse_client_event(raw)


@pytest.mark.parametrize(
    "event,data",
    [
        ("join live class", {"liveClassId": "lc1"}),
        ("join live class", {"liveClassId": "", "user": "Alice"}),
        ("leave live class", {"user": "Alice"}),
        ("screen share", {"liveClassId": "lc1", "sharing": "sometimes"}),
        ("teacher signal", {"studentSocketId": "abc"}),
        ("student signal", {"signal": {}}),
    ],
)
def test_schema_violations_carry_event_name(event, data):
    with pytest.raises(InvalidPayload) as exc:
        ws.parse_client_event(_raw(event, data))

    assert exc.value.event == event
    assert exc.value.code == "invalid_payload"
    assert exc.value.detail
