from fastapi.requests import HTTPConnection

from lectern.runtime.hub import LiveClassHub


def get_hub(conn: HTTPConnection) -> LiveClassHub:
    """The app-owned hub, for both HTTP and WebSocket routes."""
    return conn.app.state.hub
