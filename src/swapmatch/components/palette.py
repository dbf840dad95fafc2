from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Palette:
    """Colour names indexed by colour code (code 1 is names[0]).

    Lives on a single registry entity; the number of names is the number of
    colours the refill and generator draw from.
    """
    names: List[str] = field(default_factory=lambda: ['red', 'orange', 'yellow', 'green', 'blue', 'indigo', 'violet'])

    @property
    def num_colors(self) -> int:
        return len(self.names)

    def name_for(self, color: int) -> str:
        if color == 0:
            return 'empty'
        return self.names[color - 1]
