import logging
from typing import List, Optional, Tuple

from esper import World
from swapmatch.events.bus import (EventBus, EVENT_MATCH_FOUND, EVENT_MATCH_CLEARED, EVENT_SCORE_CHANGED,
                                  EVENT_CASCADE_STEP, EVENT_CASCADE_COMPLETE, EVENT_NO_MOVES_LEFT,
                                  EVENT_BOARD_RESET_REQUEST)
from swapmatch.components.match import MatchSet
from swapmatch.systems.cascade import cascade_scan
from swapmatch.systems.diagnostics import check_board_invariants
from swapmatch.systems.moves import has_any_legal_move, has_possible_move
from swapmatch.systems.resolver import ResolveResult, resolve
from swapmatch.utils.board_state import get_board, get_cascade_state, get_rng, get_score

Position = Tuple[int, int]

logger = logging.getLogger(__name__)


def matched_positions(matches: MatchSet) -> List[Position]:
    return sorted({cell for match in matches for cell in match.cells()})


def resolve_and_record(
    world: World,
    event_bus: EventBus,
    matches: MatchSet,
    *,
    reason: str,
    swap: Optional[Tuple[Position, Position]] = None,
) -> ResolveResult:
    """Resolve a match set against the world's board and publish the outcome."""
    board = get_board(world)
    previous = list(board.cells)
    positions = matched_positions(matches)
    event_bus.emit(EVENT_MATCH_FOUND, matches=list(matches), positions=positions, reason=reason)
    result = resolve(board, matches, get_rng(world), board.num_colors)
    event_bus.emit(EVENT_MATCH_CLEARED, positions=result.cleared, affected=dict(result.affected), score=result.score)
    score = get_score(world)
    score.add(result.score)
    event_bus.emit(EVENT_SCORE_CHANGED, total=score.total, delta=result.score)
    check_board_invariants(event_bus, board, previous=previous, matches=matches, swap=swap)
    return result


class MatchResolutionSystem:
    def __init__(self, world: World, event_bus: EventBus, *, reset_on_stalemate: bool = True):
        self.world = world
        self.event_bus = event_bus
        self.reset_on_stalemate = reset_on_stalemate

    def cascade_step(self) -> MatchSet:
        """Advance the cascade by one generation.

        Returns the matches resolved in this generation; an empty list means the
        board is settled (or no cascade was pending).
        """
        state = get_cascade_state(self.world)
        if not state.cascade_active:
            return []
        board = get_board(self.world)
        matches = cascade_scan(board, state.affected)
        if not matches:
            depth = state.cascade_depth
            state.finish()
            logger.debug("Cascade complete at depth %d", depth)
            self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=depth)
            self._check_stalemate()
            return []
        state.cascade_depth += 1
        self.event_bus.emit(
            EVENT_CASCADE_STEP,
            depth=state.cascade_depth,
            matches=list(matches),
            positions=matched_positions(matches),
        )
        result = resolve_and_record(self.world, self.event_bus, matches, reason="cascade", swap=state.last_swap)
        state.affected = dict(result.affected)
        return matches

    def settle(self) -> List[MatchSet]:
        """Run cascade steps until the board is stable; return each generation."""
        generations: List[MatchSet] = []
        while True:
            matches = self.cascade_step()
            if not matches:
                return generations
            generations.append(matches)

    def is_possible_move(self, x: int, y: int) -> bool:
        return has_possible_move(get_board(self.world), x, y)

    def has_any_legal_move(self) -> bool:
        return has_any_legal_move(get_board(self.world))

    def _check_stalemate(self) -> None:
        if has_any_legal_move(get_board(self.world)):
            return
        logger.info("No legal moves left")
        self.event_bus.emit(EVENT_NO_MOVES_LEFT)
        if self.reset_on_stalemate:
            self.event_bus.emit(EVENT_BOARD_RESET_REQUEST, reason="stalemate")
