WS_URL = "/v1/live/ws"


def events(conn, name=None):
    """Drain a connection's outbox, optionally keeping only one event's payloads."""
    frames = conn.drain()
    if name is None:
        return frames
    return [f["data"] for f in frames if f["event"] == name]


def frame(event, data=None):
    return {"event": event, "data": data}
