from __future__ import annotations


class LecternError(Exception):
    """Base error for problems reported back to a live class client."""

    code = "error"

    def __init__(self, detail: str, *, event: str | None = None):
        super().__init__(detail)
        self.detail = detail
        self.event = event


class InvalidPayload(LecternError):
    """Frame that is not JSON, names an unknown event, or fails its schema."""

    code = "invalid_payload"


class UnknownLiveClass(LecternError):
    code = "unknown_live_class"

    def __init__(self, live_class_id: str, *, event: str | None = None):
        super().__init__(f"live class {live_class_id!r} not found", event=event)
        self.live_class_id = live_class_id
