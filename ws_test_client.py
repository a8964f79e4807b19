#!/usr/bin/env python3
"""
WebSocket Test Client for the lectern live class endpoint

Usage:
    python ws_test_client.py <server_url>

Examples:
    python ws_test_client.py ws://localhost:8000
    python ws_test_client.py wss://your-server.com  # For HTTPS

Commands (while connected):
    /join <live_class_id> <name>     join a live class under a display name
    /leave <live_class_id> <name>    leave it again
    /share <live_class_id> on|off    start/stop screen sharing (presenter)
    /want <live_class_id>            ask the presenter for the stream (viewer)
    /signal <socket_id> <text>       send a teacher signal to one viewer
    /ssignal <live_class_id> <text>  send a student signal to the room
    anything else                    chat message to everyone
    quit / exit                      disconnect
"""

import asyncio
import json
import sys

import websockets


def print_event(frame: dict) -> None:
    """Pretty print a received event frame."""
    event = frame.get("event", "unknown")
    data = frame.get("data")

    print()
    if event == "connected":
        print(f"🔌 CONNECTED as {data.get('socketId')}")
    elif event == "live class attendees":
        names = ", ".join(data) if data else "(nobody)"
        print(f"👥 ATTENDEES: {names}")
    elif event == "chat message":
        print(f"💬 CHAT: {data}")
    elif event == "screen share":
        print(f"🖥️  SCREEN SHARE: {'on' if data.get('sharing') else 'off'}")
    elif event == "student wants stream":
        print(f"🙋 STREAM REQUEST from {data.get('studentSocketId')}")
    elif event in ("teacher signal", "student signal"):
        print(f"📡 {event.upper()}: {json.dumps(data, default=str)}")
    elif event == "error":
        print(f"❌ ERROR [{data.get('code')}] {data.get('detail')}")
    else:
        print(f"📨 {event}: {json.dumps(data, indent=2, default=str)}")


def build_frame(line: str) -> dict | None:
    """Turn one input line into an event frame, or None if it is not understood."""
    if not line.startswith("/"):
        return {"event": "chat message", "data": line}

    cmd, *args = line.split(maxsplit=2)
    if cmd in ("/join", "/leave") and len(args) == 2:
        event = "join live class" if cmd == "/join" else "leave live class"
        return {"event": event, "data": {"liveClassId": args[0], "user": args[1]}}
    if cmd == "/share" and len(args) == 2:
        return {"event": "screen share", "data": {"liveClassId": args[0], "sharing": args[1] == "on"}}
    if cmd == "/want" and len(args) == 1:
        return {"event": "student wants stream", "data": {"liveClassId": args[0]}}
    if cmd == "/signal" and len(args) == 2:
        return {"event": "teacher signal", "data": {"studentSocketId": args[0], "signal": args[1]}}
    if cmd == "/ssignal" and len(args) == 2:
        return {"event": "student signal", "data": {"liveClassId": args[0], "signal": args[1]}}
    return None


async def receive_events(websocket) -> None:
    """Task to continuously receive and print events."""
    try:
        async for message in websocket:
            try:
                print_event(json.loads(message))
            except json.JSONDecodeError:
                print(f"\n⚠️  Received non-JSON message: {message}")
            print("[You] > ", end="", flush=True)
    except websockets.exceptions.ConnectionClosed as e:
        print(f"\n❌ Connection closed: {e}")


async def send_commands(websocket) -> None:
    """Task to read user input and send event frames."""
    loop = asyncio.get_running_loop()

    while True:
        print("[You] > ", end="", flush=True)
        line = (await loop.run_in_executor(None, sys.stdin.readline)).strip()
        if not line:
            continue

        if line.lower() in ("quit", "exit"):
            print("👋 Disconnecting...")
            await websocket.close()
            break

        frame = build_frame(line)
        if frame is None:
            print("   ? unknown command, see the help above")
            continue

        try:
            await websocket.send(json.dumps(frame))
        except websockets.exceptions.ConnectionClosed:
            print("\n❌ Connection was closed")
            break


async def main(server_url: str) -> None:
    ws_url = f"{server_url}/v1/live/ws"
    print(f"🔌 Connecting to: {ws_url}")
    print(__doc__)

    try:
        async with websockets.connect(ws_url) as websocket:
            receive_task = asyncio.create_task(receive_events(websocket))
            send_task = asyncio.create_task(send_commands(websocket))

            done, pending = await asyncio.wait(
                [receive_task, send_task],
                return_when=asyncio.FIRST_COMPLETED,
            )
            for task in pending:
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass

    except websockets.exceptions.InvalidURI as e:
        print(f"❌ Invalid URI: {e}")
        print("   Make sure the server URL starts with ws:// or wss://")
    except ConnectionRefusedError:
        print("❌ Connection refused. Is the server running?")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        print(f"Usage: python {sys.argv[0]} <server_url>")
        sys.exit(1)

    server_url = sys.argv[1].rstrip("/")
    if not server_url.startswith(("ws://", "wss://")):
        print("⚠️  Warning: URL should start with ws:// or wss://, assuming ws://")
        server_url = f"ws://{server_url}"

    try:
        asyncio.run(main(server_url))
    except KeyboardInterrupt:
        print("\n\n👋 Interrupted by user. Goodbye!")
        sys.exit(0)
