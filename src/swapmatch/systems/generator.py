from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List

from swapmatch.components.board import Board
from swapmatch.constants import GENERATOR_MAX_ATTEMPTS, GRID_COLS, GRID_ROWS, NUM_COLORS
from swapmatch.systems.detector import find_all_matches
from swapmatch.systems.moves import has_any_legal_move

logger = logging.getLogger(__name__)


class BoardGenerationError(RuntimeError):
    """Raised when no playable layout was found within the attempt budget."""


def is_playable(board: Board) -> bool:
    """A board is playable when it holds no match yet offers at least one move."""
    return not find_all_matches(board) and has_any_legal_move(board)


def _constrained_layout(rng: random.Random, width: int, height: int, num_colors: int) -> List[int] | None:
    choices = list(range(1, num_colors + 1))
    cells: List[int] = []
    for y in range(height):
        for x in range(width):
            available = choices
            if x >= 2:
                left1 = cells[y * width + x - 1]
                left2 = cells[y * width + x - 2]
                if left1 == left2:
                    available = [c for c in available if c != left1]
            if y >= 2:
                up1 = cells[(y - 1) * width + x]
                up2 = cells[(y - 2) * width + x]
                if up1 == up2:
                    available = [c for c in available if c != up1]
            if not available:
                return None
            cells.append(rng.choice(available))
    return cells


def generate_board(
    rng: random.Random | None = None,
    width: int = GRID_COLS,
    height: int = GRID_ROWS,
    num_colors: int = NUM_COLORS,
    max_attempts: int = GENERATOR_MAX_ATTEMPTS,
) -> Board:
    """Fill a fresh board that contains no matches and at least one valid move."""
    rng = rng or random.Random()
    for attempt in range(1, max_attempts + 1):
        cells = _constrained_layout(rng, width, height, num_colors)
        if cells is None:
            continue
        board = Board(width=width, height=height, cells=cells, num_colors=num_colors)
        if not is_playable(board):
            logger.debug("Discarding degenerate layout on attempt %d", attempt)
            continue
        return board
    raise BoardGenerationError(
        f"Unable to generate a {width}x{height} board with {num_colors} colours in {max_attempts} attempts"
    )


@dataclass(slots=True)
class GenerationStats:
    samples: int = 0
    without_moves: int = 0
    unplayable: List[Board] = field(default_factory=list)


def sample_unplayable_starts(
    count: int = 10000,
    rng: random.Random | None = None,
    width: int = GRID_COLS,
    height: int = GRID_ROWS,
    num_colors: int = NUM_COLORS,
) -> GenerationStats:
    """Measure how often an unchecked constrained fill would be unplayable."""
    rng = rng or random.Random()
    stats = GenerationStats()
    for _ in range(count):
        cells = _constrained_layout(rng, width, height, num_colors)
        if cells is None:
            continue
        stats.samples += 1
        board = Board(width=width, height=height, cells=cells, num_colors=num_colors)
        if not has_any_legal_move(board):
            stats.without_moves += 1
            stats.unplayable.append(board)
    return stats
