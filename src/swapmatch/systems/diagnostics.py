from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from swapmatch.components.board import Board
from swapmatch.components.match import Match
from swapmatch.events.bus import EVENT_BOARD_INVARIANT_VIOLATION, EventBus

Position = Tuple[int, int]

logger = logging.getLogger(__name__)


def find_board_problems(board: Board) -> List[str]:
    problems: List[str] = []
    if len(board.cells) != board.width * board.height:
        problems.append(f"cell_count:{len(board.cells)}")
    empties = board.empty_cells()
    if empties:
        problems.append(f"empty_cells:{len(empties)}")
    return problems


def check_board_invariants(
    event_bus: EventBus,
    board: Board,
    *,
    previous: Sequence[int],
    matches: Sequence[Match],
    swap: Optional[Tuple[Position, Position]] = None,
) -> bool:
    """Self-check after a resolution; report problems without raising.

    Leftover empties or a wrong cell count point at a resolver defect, so the
    pre-resolution state and the matches involved are published for debugging.
    """
    problems = find_board_problems(board)
    if not problems:
        return True
    logger.warning(
        "Board invariant violated (%s) after swap %s with matches %s; previous state:\n%s",
        ", ".join(problems),
        swap,
        [m.to_str() for m in matches],
        Board(width=board.width, height=board.height, cells=list(previous), num_colors=board.num_colors).format()
        if len(previous) == board.width * board.height else list(previous),
    )
    event_bus.emit(
        EVENT_BOARD_INVARIANT_VIOLATION,
        problem=", ".join(problems),
        empties=board.empty_cells(),
        previous=list(previous),
        swap=swap,
        matches=list(matches),
    )
    return False
