"""In-process entry point for presentation code.

Wires the world, event bus and systems for one board and exposes the calls a
renderer or input layer needs. Rendering and animation pacing stay outside:
callers animate between ``swap``/``cascade_step`` results and call again.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence

from swapmatch.components.board import Board
from swapmatch.components.match import MatchSet
from swapmatch.constants import GRID_COLS, GRID_ROWS
from swapmatch.events.bus import EventBus
from swapmatch.systems.board import BoardSystem
from swapmatch.systems.match import MatchSystem
from swapmatch.systems.match_resolution import MatchResolutionSystem
from swapmatch.utils.board_state import get_score
from swapmatch.world import create_world


class MatchSession:
    def __init__(
        self,
        event_bus: Optional[EventBus] = None,
        *,
        width: int = GRID_COLS,
        height: int = GRID_ROWS,
        rng: random.Random | None = None,
        board: Optional[Board] = None,
        color_names: Sequence[str] | None = None,
        reset_on_stalemate: bool = True,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(rng=rng, color_names=color_names)
        self.board_system = BoardSystem(self.world, self.event_bus, width, height, board=board)
        self.match_system = MatchSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(
            self.world, self.event_bus, reset_on_stalemate=reset_on_stalemate
        )

    @property
    def board(self) -> Board:
        return self.board_system.board

    @property
    def score(self) -> int:
        return get_score(self.world).total

    def swap(self, x1: int, y1: int, x2: int, y2: int) -> MatchSet:
        return self.match_system.swap(x1, y1, x2, y2)

    def cascade_step(self) -> MatchSet:
        return self.match_resolution_system.cascade_step()

    def settle(self) -> List[MatchSet]:
        return self.match_resolution_system.settle()

    def is_possible_move(self, x: int, y: int) -> bool:
        return self.match_resolution_system.is_possible_move(x, y)

    def has_any_legal_move(self) -> bool:
        return self.match_resolution_system.has_any_legal_move()

    def reset(self) -> Board:
        return self.board_system.reset(reason="requested")

    def color_at(self, x: int, y: int) -> int:
        return self.board_system.color_at(x, y)
