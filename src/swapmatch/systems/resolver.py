from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from swapmatch.components.board import Board
from swapmatch.components.match import Match, score_match
from swapmatch.constants import EMPTY

Position = Tuple[int, int]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResolveResult:
    """Outcome of clearing one match set.

    affected maps every column whose tiles moved or were refilled to the lowest
    row disturbed in that column.
    """
    affected: Dict[int, int] = field(default_factory=dict)
    score: int = 0
    cleared: List[Position] = field(default_factory=list)


def clear_matches(board: Board, matches: Sequence[Match]) -> Tuple[List[Position], int]:
    """Set every matched cell to EMPTY and total the score of the set."""
    cleared: List[Position] = []
    seen: set[Position] = set()
    score = 0
    for match in matches:
        for x, y in match.cells():
            board.set_color(x, y, EMPTY)
            if (x, y) not in seen:
                seen.add((x, y))
                cleared.append((x, y))
        score += score_match(match)
    return cleared, score


def collapse_column(board: Board, x: int, start_y: int) -> None:
    """Bubble empties from start_y up to the top of column x.

    Surviving tiles keep their relative order and end up packed against the
    lowest gap.
    """
    for y in range(start_y, 0, -1):
        if board.color_at(x, y) != EMPTY:
            continue
        above = y - 1
        while above > 0 and board.color_at(x, above) == EMPTY:
            above -= 1
        board.swap(x, y, x, above)


def refill_column(board: Board, x: int, rng: random.Random, num_colors: int) -> int:
    """Fill the empties at the top of column x with fresh colours; return how many."""
    y = 0
    while y < board.height and board.color_at(x, y) == EMPTY:
        board.set_color(x, y, rng.randint(1, num_colors))
        y += 1
    return y


def resolve(
    board: Board,
    matches: Sequence[Match],
    rng: random.Random,
    num_colors: int | None = None,
) -> ResolveResult:
    """Clear matches, let the survivors fall and refill from the top.

    Matches are handled bottom-to-top by origin row so the gravity pass always
    starts below any gap left by a later match in the same column.
    """
    if not matches:
        return ResolveResult()
    colors = num_colors or board.num_colors
    cleared, score = clear_matches(board, matches)
    affected: Dict[int, int] = {}
    for match in sorted(matches, key=lambda m: m.origin_y, reverse=True):
        bottom = match.bottom_row()
        for x in match.columns():
            collapse_column(board, x, bottom)
            refill_column(board, x, rng, colors)
            affected[x] = max(affected.get(x, bottom), bottom)
    logger.debug("Resolved %d matches, %d cells cleared, score %d", len(matches), len(cleared), score)
    return ResolveResult(affected=affected, score=score, cleared=cleared)
