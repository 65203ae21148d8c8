"""Websocket stream of domain events for connected observers.

Each connection subscribes to the dispatcher for as long as it is open.
The dispatcher calls back on its own thread, so messages are handed to
the connection's event loop with ``call_soon_threadsafe`` and buffered
in a bounded per-connection outbox.  Late joiners get no replay.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, WebSocket

logger = logging.getLogger(__name__)

router = APIRouter(tags=["events"])

OUTBOX_SIZE = 256


def _offer(outbox: asyncio.Queue, message: dict[str, Any]) -> None:
    try:
        outbox.put_nowait(message)
    except asyncio.QueueFull:
        logger.warning("observer outbox full, dropping event", extra={"event": message["event"]})


async def _forward(websocket: WebSocket, outbox: asyncio.Queue) -> None:
    while True:
        message = await outbox.get()
        await websocket.send_json(message)


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/events")
async def stream_events(websocket: WebSocket) -> None:
    dispatcher = websocket.app.state.container.dispatcher
    loop = asyncio.get_running_loop()
    outbox: asyncio.Queue = asyncio.Queue(maxsize=OUTBOX_SIZE)

    def on_event(name: str, data: dict[str, Any]) -> None:
        loop.call_soon_threadsafe(_offer, outbox, {"event": name, "data": data})

    # Subscribe before accepting so nothing published after the
    # handshake completes can be missed.
    token = dispatcher.subscribe(on_event)
    try:
        await websocket.accept()
        logger.info("observer connected", extra={"client": str(websocket.client)})
        tasks = [
            asyncio.create_task(_forward(websocket, outbox)),
            asyncio.create_task(_wait_for_disconnect(websocket)),
        ]
        await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
    finally:
        dispatcher.unsubscribe(token)
        logger.info("observer disconnected", extra={"client": str(websocket.client)})
