from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(slots=True)
class CascadeState:
    """Tracks the cascade in progress on the board entity.

    affected maps each column disturbed by the last resolution to the lowest row
    that was touched there; an empty mapping means the board is settled.
    """
    cascade_active: bool = False
    cascade_depth: int = 0
    affected: Dict[int, int] = field(default_factory=dict)
    last_swap: Optional[Tuple[Tuple[int, int], Tuple[int, int]]] = None

    def begin(self, affected: Dict[int, int], swap: Optional[Tuple[Tuple[int, int], Tuple[int, int]]] = None) -> None:
        self.cascade_active = True
        self.cascade_depth = 0
        self.affected = dict(affected)
        self.last_swap = swap

    def finish(self) -> None:
        self.cascade_active = False
        self.affected = {}
