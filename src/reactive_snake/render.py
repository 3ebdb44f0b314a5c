"""Text rendering of game states."""

from __future__ import annotations

import enum

import numpy as np

from reactive_snake.board import BOARD_SIZE, cells, is_out_of_bounds, to_grid
from reactive_snake.state import GameState


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy grid."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


_GLYPHS: dict[CellType, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "o",
    CellType.HEAD: "@",
    CellType.FOOD: "*",
}


def occupancy(state: GameState, board_size: int = BOARD_SIZE) -> np.ndarray:
    """Return an ``int8`` grid of :class:`CellType` codes, top row first."""
    side = cells(board_size)
    grid = np.zeros((side, side), dtype=np.int8)
    if state.food is not None and not is_out_of_bounds(state.food, board_size):
        grid[to_grid(state.food, board_size)] = CellType.FOOD
    for seg in state.snake:
        if not is_out_of_bounds(seg, board_size):
            grid[to_grid(seg, board_size)] = CellType.SNAKE
    head = state.snake.head
    if not is_out_of_bounds(head, board_size):
        grid[to_grid(head, board_size)] = CellType.HEAD
    return grid


def render_text(state: GameState, board_size: int = BOARD_SIZE) -> str:
    """Draw *state* as ASCII art followed by a status line."""
    grid = occupancy(state, board_size)
    rows = [
        "".join(_GLYPHS[CellType(code)] for code in row.tolist())
        for row in grid
    ]
    status = f"tick={state.tick_count} score={state.score}"
    if state.is_over:
        status += " GAME OVER"
    rows.append(status)
    return "\n".join(rows)
