import logging
from typing import Optional

from esper import World
from swapmatch.events.bus import EventBus, EVENT_BOARD_RESET, EVENT_BOARD_RESET_REQUEST
from swapmatch.components.board import Board
from swapmatch.components.cascade_state import CascadeState
from swapmatch.components.score import Score
from swapmatch.constants import GENERATOR_MAX_ATTEMPTS, GRID_COLS, GRID_ROWS
from swapmatch.systems.generator import generate_board
from swapmatch.utils.board_state import get_board, get_cascade_state, get_palette, get_rng, replace_board

logger = logging.getLogger(__name__)


class BoardSystem:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        width: int = GRID_COLS,
        height: int = GRID_ROWS,
        *,
        board: Optional[Board] = None,
        max_attempts: int = GENERATOR_MAX_ATTEMPTS,
    ):
        self.world = world
        self.event_bus = event_bus
        self.width = width
        self.height = height
        self.max_attempts = max_attempts
        # Create a single board entity; a supplied layout skips generation (fixtures, replays).
        initial = board if board is not None else self._generate()
        palette_colors = get_palette(self.world).num_colors
        if initial.num_colors != palette_colors:
            raise ValueError(
                f"Board uses {initial.num_colors} colours but the palette defines {palette_colors}"
            )
        self.width, self.height = initial.width, initial.height
        self.board_entity = self.world.create_entity(initial, Score(), CascadeState())
        self.event_bus.subscribe(EVENT_BOARD_RESET_REQUEST, self.on_reset_request)

    @property
    def board(self) -> Board:
        return get_board(self.world)

    def color_at(self, x: int, y: int) -> int:
        return self.board.color_at(x, y)

    def reset(self, reason: Optional[str] = None) -> Board:
        """Replace the board with a freshly generated playable layout."""
        board = self._generate()
        replace_board(self.world, board)
        get_cascade_state(self.world).finish()
        logger.info("Board reset (%s)", reason or "requested")
        self.event_bus.emit(EVENT_BOARD_RESET, reason=reason)
        return board

    def on_reset_request(self, sender, **kwargs):
        self.reset(reason=kwargs.get('reason'))

    def _generate(self) -> Board:
        return generate_board(
            get_rng(self.world),
            width=self.width,
            height=self.height,
            num_colors=get_palette(self.world).num_colors,
            max_attempts=self.max_attempts,
        )
