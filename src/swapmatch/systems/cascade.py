from __future__ import annotations

import logging
import random
from typing import Dict, List, Mapping

from swapmatch.components.board import Board
from swapmatch.components.match import MatchSet
from swapmatch.systems.dedup import accumulate
from swapmatch.systems.detector import detect_match
from swapmatch.systems.resolver import ResolveResult, resolve

logger = logging.getLogger(__name__)


def cascade_scan(board: Board, affected: Mapping[int, int]) -> MatchSet:
    """Look for new matches in the columns disturbed by the last resolution.

    Cells below the lowest disturbed row of a column never moved, so only rows
    0..affected[x] are rescanned. They are walked top-down so every match is
    anchored on the lowest-index cell of its run.
    """
    matches: MatchSet = []
    for x in sorted(affected):
        for y in range(affected[x] + 1):
            candidate = detect_match(board, x, y)
            if candidate is not None:
                accumulate(matches, candidate)
    return matches


def cascade(
    board: Board,
    affected: Mapping[int, int],
    rng: random.Random,
    num_colors: int | None = None,
) -> List[ResolveResult]:
    """Resolve chain reactions until the board is stable.

    Depth is unbounded; each generation's result is returned in order.
    """
    results: List[ResolveResult] = []
    region: Dict[int, int] = dict(affected)
    while region:
        matches = cascade_scan(board, region)
        if not matches:
            break
        result = resolve(board, matches, rng, num_colors)
        results.append(result)
        region = result.affected
        logger.debug("Cascade generation %d cleared %d matches", len(results), len(matches))
    return results
