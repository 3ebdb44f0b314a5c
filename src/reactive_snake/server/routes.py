"""REST API route handlers for the running game."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from reactive_snake.events import Restart, event_type
from reactive_snake.server.models import ConfigResponse, KeyRequest, KeyResponse
from reactive_snake.server.session import GameSession

router = APIRouter(tags=["game"])


def _get_session(request: Request) -> GameSession:
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise HTTPException(status_code=503, detail="Game session not running.")
    return session


@router.get("/state")
async def get_state(request: Request) -> dict:
    """Return the latest folded game state."""
    return _get_session(request).state.to_dict()


@router.get("/config")
async def get_config(request: Request) -> ConfigResponse:
    """Return the active game configuration."""
    return ConfigResponse(**_get_session(request).config.to_dict())


@router.post("/keys", status_code=202)
async def press_keys(body: KeyRequest, request: Request) -> KeyResponse:
    """Queue the event produced by a key press."""
    session = _get_session(request)
    event = body.to_event()
    session.loop.submit(event)
    return KeyResponse(event=event_type(event), pending=session.loop.pending)


@router.post("/restart", status_code=202)
async def restart(request: Request) -> KeyResponse:
    """Queue a restart."""
    session = _get_session(request)
    session.loop.submit(Restart())
    return KeyResponse(event="restart", pending=session.loop.pending)
