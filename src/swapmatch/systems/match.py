import logging
from typing import Tuple

from esper import World
from swapmatch.events.bus import EventBus, EVENT_TILE_SWAP_REQUEST, EVENT_TILE_SWAP_VALID, EVENT_TILE_SWAP_INVALID
from swapmatch.components.match import MatchSet
from swapmatch.constants import EMPTY
from swapmatch.systems.dedup import accumulate
from swapmatch.systems.detector import detect_match
from swapmatch.systems.match_resolution import resolve_and_record
from swapmatch.utils.board_state import get_board, get_cascade_state

logger = logging.getLogger(__name__)


class MatchSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if not src or not dst:
            return
        self.swap(src[0], src[1], dst[0], dst[1])

    def swap(self, x1: int, y1: int, x2: int, y2: int) -> MatchSet:
        """Swap two tiles and resolve the resulting matches.

        (x1, y1) is the tile the player picked up and (x2, y2) the cell it moves
        into. An illegal move leaves the board untouched and returns an empty list.

        A valid swap resolves its own matches and then locks input: further swaps
        are rejected with 'cascade_active' until cascade_step() has returned an
        empty list, even when the refill created nothing to cascade.
        """
        board = get_board(self.world)
        src: Tuple[int, int] = (x1, y1)
        dst: Tuple[int, int] = (x2, y2)
        # Out-of-range coordinates raise here, before anything is modified.
        a = board.color_at(x1, y1)
        b = board.color_at(x2, y2)
        reason = None
        if get_cascade_state(self.world).cascade_active:
            reason = 'cascade_active'
        elif not board.is_adjacent(x1, y1, x2, y2):
            reason = 'not_adjacent'
        elif a == EMPTY or b == EMPTY:
            reason = 'empty_cell'
        if reason is not None:
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst, reason=reason)
            return []

        board.swap(x1, y1, x2, y2)
        matches: MatchSet = []
        for x, y in (dst, src):
            candidate = detect_match(board, x, y)
            if candidate is not None:
                accumulate(matches, candidate)
        if not matches:
            # Roll back the illegal move.
            board.swap(x1, y1, x2, y2)
            logger.debug("Swap %s -> %s rejected: no match", src, dst)
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst, reason='no_match')
            return []

        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst)
        result = resolve_and_record(self.world, self.event_bus, matches, reason="swap", swap=(src, dst))
        get_cascade_state(self.world).begin(result.affected, swap=(src, dst))
        return matches
