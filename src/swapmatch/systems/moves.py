from __future__ import annotations

from typing import List, Set, Tuple

from swapmatch.components.board import Board
from swapmatch.constants import EMPTY

Position = Tuple[int, int]

# Clockwise from the top right: NE, SE, SW, NW.
CORNERS: Tuple[Position, ...] = ((1, -1), (1, 1), (-1, 1), (-1, -1))
CARDINALS: Tuple[Position, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _same(board: Board, x: int, y: int, color: int) -> bool:
    return board.in_bounds(x, y) and board.color_at(x, y) == color


def run_targets(board: Board, x: int, y: int, color: int | None = None) -> Set[Position]:
    """Neighbouring cells the tile at (x, y) could be swapped into to complete a run.

    Reads only the cells around the tile; the board is never modified. color
    overrides the tile's own colour, which lets a swap partner be tested as if
    it already sat at (x, y).
    """
    if color is None:
        color = board.color_at(x, y)
    targets: Set[Position] = set()
    if color == EMPTY:
        return targets
    hits = [_same(board, x + dx, y + dy, color) for dx, dy in CORNERS]

    for i, (dx, dy) in enumerate(CORNERS):
        if not hits[i]:
            continue
        # Two neighbouring corners flank the orthogonal cell between them (wraps NW -> NE).
        nx, ny = CORNERS[(i + 1) % len(CORNERS)]
        if hits[(i + 1) % len(CORNERS)]:
            targets.add((x + dx, y) if dx == nx else (x, y + dy))
        # One corner plus the cell beyond it in line.
        if _same(board, x + dx, y + 2 * dy, color):
            targets.add((x + dx, y))
        if _same(board, x + 2 * dx, y + dy, color):
            targets.add((x, y + dy))

    for dx, dy in CARDINALS:
        if _same(board, x + 2 * dx, y + 2 * dy, color) and _same(board, x + 3 * dx, y + 3 * dy, color):
            targets.add((x + dx, y + dy))

    # Swapping with an identical colour changes nothing; empty cells cannot be swapped.
    return {(tx, ty) for tx, ty in targets if board.color_at(tx, ty) not in (EMPTY, color)}


def has_possible_move(board: Board, x: int, y: int) -> bool:
    """True if swapping (x, y) with an orthogonal neighbour creates a match."""
    color = board.color_at(x, y)
    if color == EMPTY:
        return False
    if run_targets(board, x, y, color):
        return True
    for dx, dy in CARDINALS:
        nx, ny = x + dx, y + dy
        if not board.in_bounds(nx, ny):
            continue
        partner = board.color_at(nx, ny)
        if partner in (EMPTY, color):
            continue
        if (x, y) in run_targets(board, nx, ny, partner):
            return True
    return False


def find_possible_moves(board: Board) -> List[Position]:
    return [(x, y) for x, y in board.coords() if has_possible_move(board, x, y)]


def has_any_legal_move(board: Board) -> bool:
    return any(run_targets(board, x, y) for x, y in board.coords())
