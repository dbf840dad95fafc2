from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Tuple

from swapmatch.constants import (
    BASE_SCORES,
    CROSS_PENALTY,
    MIN_RUN,
    SCORE_PER_EXTRA_CELL,
)

Coord = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Match:
    """One matched shape, described relative to an origin cell.

    For a match created by a player's move the origin is the cell the tile moved
    into; for a match found during a cascade it is the cell that was scanned.

    offset_x / offset_y count how far the run extends before the origin and are
    never positive. length_x / length_y are the total run lengths through the
    origin on each axis; a length of 1 means that axis contributes nothing and
    its offset is 0. Both lengths >= 3 describes a T, L or plus shape.
    """
    origin_x: int
    origin_y: int
    offset_x: int = 0
    offset_y: int = 0
    length_x: int = 1
    length_y: int = 1

    def __post_init__(self) -> None:
        if self.offset_x > 0 or self.offset_y > 0:
            raise ValueError("Match offsets must not be positive")
        if self.length_x < 1 or self.length_y < 1:
            raise ValueError("Match lengths must be at least 1")
        if -self.offset_x >= self.length_x or -self.offset_y >= self.length_y:
            raise ValueError("Match run must contain its origin")

    @property
    def number_of_cells(self) -> int:
        return self.length_x + self.length_y - 1

    @property
    def is_cross(self) -> bool:
        return self.length_x > 1 and self.length_y > 1

    def cells(self) -> Iterator[Coord]:
        """Yield the horizontal segment left to right, then the vertical segment
        top to bottom, skipping the origin the second time."""
        start_x = self.origin_x + self.offset_x
        for x in range(start_x, start_x + self.length_x):
            yield (x, self.origin_y)
        start_y = self.origin_y + self.offset_y
        for y in range(start_y, start_y + self.length_y):
            if y != self.origin_y:
                yield (self.origin_x, y)

    def cell_set(self) -> FrozenSet[Coord]:
        return frozenset(self.cells())

    def columns(self) -> range:
        start_x = self.origin_x + self.offset_x
        return range(start_x, start_x + self.length_x)

    def bottom_row(self) -> int:
        return self.origin_y + self.offset_y + self.length_y - 1

    def has_same_cells_as(self, other: "Match") -> bool:
        return self.cell_set() == other.cell_set()

    def is_superset_of(self, other: "Match") -> bool:
        return self.cell_set() >= other.cell_set()

    def is_strict_superset_of(self, other: "Match") -> bool:
        return self.number_of_cells > other.number_of_cells and self.is_superset_of(other)

    def to_str(self) -> str:
        """Compact "x,y;" listing of the covered cells in board (row-major) order."""
        ordered = sorted(self.cells(), key=lambda cell: (cell[1], cell[0]))
        return "".join(f"{x},{y};" for x, y in ordered)


MatchSet = List[Match]


def score_match(match: Match) -> int:
    cells = match.number_of_cells
    if cells < MIN_RUN:
        return 0
    if cells in BASE_SCORES:
        score = BASE_SCORES[cells]
    else:
        top = max(BASE_SCORES)
        score = BASE_SCORES[top] + (cells - top) * SCORE_PER_EXTRA_CELL
    if match.is_cross:
        score -= CROSS_PENALTY
    return score
