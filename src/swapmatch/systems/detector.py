from __future__ import annotations

from typing import Optional

from swapmatch.components.board import Board
from swapmatch.components.match import Match, MatchSet
from swapmatch.constants import EMPTY, MIN_RUN
from swapmatch.systems.dedup import accumulate


def detect_match(board: Board, x: int, y: int) -> Optional[Match]:
    """Return the match running through (x, y), or None.

    A single pass scans all four directions, so straight lines, L/T corners and
    plus shapes centred on the origin all come out of the same call.
    """
    color = board.color_at(x, y)
    if color == EMPTY:
        return None
    length_x = length_y = 1
    offset_x = offset_y = 0

    row = y - 1
    while row >= 0 and board.color_at(x, row) == color:
        length_y += 1
        offset_y -= 1
        row -= 1
    row = y + 1
    while row < board.height and board.color_at(x, row) == color:
        length_y += 1
        row += 1
    col = x - 1
    while col >= 0 and board.color_at(col, y) == color:
        length_x += 1
        offset_x -= 1
        col -= 1
    col = x + 1
    while col < board.width and board.color_at(col, y) == color:
        length_x += 1
        col += 1

    # Short runs must not leak into the clearing/refill spans.
    if length_x < MIN_RUN:
        length_x, offset_x = 1, 0
    if length_y < MIN_RUN:
        length_y, offset_y = 1, 0
    if length_x < MIN_RUN and length_y < MIN_RUN:
        return None
    return Match(x, y, offset_x, offset_y, length_x, length_y)


def find_all_matches(board: Board) -> MatchSet:
    """Detect every match on the board, deduplicated."""
    matches: MatchSet = []
    for x, y in board.coords():
        candidate = detect_match(board, x, y)
        if candidate is not None:
            accumulate(matches, candidate)
    return matches
