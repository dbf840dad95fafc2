import random
from typing import Sequence

from esper import World
from swapmatch.components.palette import Palette


def create_world(
    *,
    rng: random.Random | None = None,
    color_names: Sequence[str] | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Single registry entity holding the colour palette.
    palette = Palette(names=list(color_names)) if color_names else Palette()
    if palette.num_colors < 3:
        raise ValueError("At least three colours are needed for a playable board")
    world.create_entity(palette)
    return world
