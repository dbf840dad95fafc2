from __future__ import annotations

import random

from esper import World

from swapmatch.components.board import Board
from swapmatch.components.cascade_state import CascadeState
from swapmatch.components.palette import Palette
from swapmatch.components.score import Score


def get_board_entity(world: World) -> int:
    for entity, _ in world.get_component(Board):
        return entity
    raise RuntimeError("Board entity not found")


def get_board(world: World) -> Board:
    return world.component_for_entity(get_board_entity(world), Board)


def replace_board(world: World, board: Board) -> None:
    """Swap in a freshly generated board on the existing board entity."""
    entity = get_board_entity(world)
    world.remove_component(entity, Board)
    world.add_component(entity, board)


def get_score(world: World) -> Score:
    return world.component_for_entity(get_board_entity(world), Score)


def get_cascade_state(world: World) -> CascadeState:
    return world.component_for_entity(get_board_entity(world), CascadeState)


def get_palette(world: World) -> Palette:
    for _, palette in world.get_component(Palette):
        return palette
    raise RuntimeError("Palette definitions not found")


def get_rng(world: World) -> random.Random:
    """Return the world's random source, creating one if the world has none."""
    candidate = getattr(world, "random", None)
    if isinstance(candidate, random.Random):
        return candidate
    rng = random.Random()
    setattr(world, "random", rng)
    return rng
