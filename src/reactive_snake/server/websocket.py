"""WebSocket handler streaming game states and accepting key presses."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from reactive_snake.server.models import KeyRequest
from reactive_snake.server.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_session(ws: WebSocket) -> GameSession | None:
    return getattr(ws.app.state, "session", None)


@ws_router.websocket("/play")
async def play(websocket: WebSocket) -> None:
    """Player WebSocket: send keys, receive game state after every event."""
    session = _get_session(websocket)
    if session is None:
        await websocket.close(code=1013, reason="Game session not running.")
        return

    await websocket.accept()
    session.subscribe(websocket)
    logger.info("Player connected.")

    # Send initial state snapshot so the client gets immediate feedback.
    await websocket.send_text(
        json.dumps(session.state.to_dict(), separators=(",", ":")),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = KeyRequest.model_validate_json(raw)
            except ValidationError:
                continue
            session.loop.submit(msg.to_event())
    except WebSocketDisconnect:
        logger.info("Player disconnected.")
    finally:
        session.unsubscribe(websocket)
