"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from reactive_snake.config import GameConfig
from reactive_snake.server.app import create_app


@pytest.fixture()
def tc():
    """TestClient with the lifespan running, so the game loop is live.

    The timer is slowed down so only submitted key presses produce states.
    """
    application = create_app(GameConfig(tick_rate_ms=60_000, seed=0))
    with TestClient(application) as client:
        yield client


class TestPlayWebSocket:
    def test_connect_and_receive_initial_state(self, tc):
        with tc.websocket_connect("/play") as ws:
            state = json.loads(ws.receive_text())
            assert state["tick"] == 0
            assert state["snake"]["length"] == 4
            assert state["food"] is None

    def test_key_press_streams_new_state(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"key": "left"}))
            state = json.loads(ws.receive_text())
            assert state["direction"] == [-1, 0]

    def test_arrows_and_space(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"arrows": {"x": 1, "y": 0}}))
            assert json.loads(ws.receive_text())["direction"] == [1, 0]
            ws.send_text(json.dumps({"space": True}))
            state = json.loads(ws.receive_text())
            assert state["direction"] == [0, 1]
            assert state["tick"] == 0

    def test_invalid_messages_ignored(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            # Garbage is silently dropped.
            ws.send_text("not-json")
            ws.send_text("[]")
            ws.send_text("123")
            ws.send_text(json.dumps({"arrows": {"x": 5}}))
            ws.send_text(json.dumps({"no_key": True}))
            ws.send_text(json.dumps({"key": "right"}))
            state = json.loads(ws.receive_text())
            assert state["direction"] == [1, 0]

    def test_two_players_share_the_stream(self, tc):
        with tc.websocket_connect("/play") as ws0, tc.websocket_connect(
            "/play",
        ) as ws1:
            ws0.receive_text()
            ws1.receive_text()
            ws0.send_text(json.dumps({"key": "left"}))
            assert json.loads(ws0.receive_text())["direction"] == [-1, 0]
            assert json.loads(ws1.receive_text())["direction"] == [-1, 0]

    def test_disconnect_unsubscribes(self, tc):
        session = tc.app.state.session
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            assert len(session.subscribers) == 1
        tc.get("/state")
        assert session.subscribers == []


class TestNoSession:
    def test_rejected_without_session(self):
        client = TestClient(create_app())
        with pytest.raises(WebSocketDisconnect), client.websocket_connect(
            "/play",
        ):
            pass
