from __future__ import annotations

import random
from typing import Dict, Iterable, List, Sequence, Tuple

from swapmatch.components.board import Board

Position = Tuple[int, int]

# Board from the move-detection fixture: no matches, several kinds of move.
MOVE_FIXTURE = [
    2, 5, 5, 1, 5, 1, 1, 3,
    4, 6, 5, 6, 4, 1, 7, 5,
    7, 7, 3, 5, 7, 3, 3, 5,
    5, 5, 7, 2, 6, 6, 4, 6,
    1, 6, 6, 1, 5, 7, 1, 3,
    1, 6, 4, 4, 7, 6, 7, 3,
    7, 7, 1, 5, 3, 6, 3, 2,
    3, 6, 7, 2, 4, 7, 4, 4,
]

# No swap anywhere on this board creates a match.
DEAD_BOARD = [
    1, 1, 6, 7, 6, 7, 4, 6,
    6, 7, 3, 5, 1, 1, 2, 6,
    3, 2, 5, 6, 2, 4, 7, 2,
    3, 5, 6, 4, 3, 1, 1, 5,
    5, 2, 3, 2, 5, 3, 2, 6,
    7, 4, 1, 6, 7, 4, 5, 7,
    6, 4, 3, 1, 6, 7, 4, 1,
    7, 7, 5, 5, 2, 3, 3, 6,
]


class ScriptedRandom(random.Random):
    """Random source that hands out scripted randint values first."""

    scripted: List[int]

    def randint(self, a, b):
        if getattr(self, "scripted", None):
            return self.scripted.pop(0)
        return super().randint(a, b)


def scripted_random(values: Iterable[int], seed: int = 0) -> ScriptedRandom:
    rng = ScriptedRandom(seed)
    rng.scripted = list(values)
    return rng


def checker_board(width: int = 5, height: int = 5, overrides: Dict[Position, int] | None = None) -> Board:
    """Alternating 4/5 board (never a run) with selected cells overridden."""
    cells = [((x + y) % 2) + 4 for y in range(height) for x in range(width)]
    for (x, y), color in (overrides or {}).items():
        cells[y * width + x] = color
    return Board(width=width, height=height, cells=cells)


def shape_board(positions: Sequence[Position], color: int = 1, width: int = 5, height: int = 5) -> Board:
    return checker_board(width, height, {pos: color for pos in positions})


def fixture_board(values: Sequence[int] = MOVE_FIXTURE) -> Board:
    return Board.from_flat(values, 8, 8)


def has_run(board: Board) -> bool:
    for y in range(board.height):
        for x in range(board.width - 2):
            color = board.color_at(x, y)
            if color and color == board.color_at(x + 1, y) == board.color_at(x + 2, y):
                return True
    for x in range(board.width):
        for y in range(board.height - 2):
            color = board.color_at(x, y)
            if color and color == board.color_at(x, y + 1) == board.color_at(x, y + 2):
                return True
    return False


def _run_through(board: Board, x: int, y: int) -> bool:
    color = board.color_at(x, y)
    horizontal = 1
    col = x - 1
    while col >= 0 and board.color_at(col, y) == color:
        horizontal += 1
        col -= 1
    col = x + 1
    while col < board.width and board.color_at(col, y) == color:
        horizontal += 1
        col += 1
    vertical = 1
    row = y - 1
    while row >= 0 and board.color_at(x, row) == color:
        vertical += 1
        row -= 1
    row = y + 1
    while row < board.height and board.color_at(x, row) == color:
        vertical += 1
        row += 1
    return horizontal >= 3 or vertical >= 3


def simulate_all_swaps(board: Board, x: int, y: int) -> bool:
    """Reference answer for the move oracle: try each swap on a copy."""
    for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
        nx, ny = x + dx, y + dy
        if not board.in_bounds(nx, ny):
            continue
        trial = board.copy()
        trial.swap(x, y, nx, ny)
        if _run_through(trial, x, y) or _run_through(trial, nx, ny):
            return True
    return False
