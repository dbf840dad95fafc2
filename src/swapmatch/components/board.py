from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from swapmatch.constants import EMPTY, NUM_COLORS

Coord = Tuple[int, int]


class BoardBoundsError(IndexError):
    """Raised when a coordinate falls outside the board."""


@dataclass(slots=True)
class Board:
    """Fixed width x height grid of colour codes.

    cells is row-major: index = y * width + x. Row 0 is the top of the board and
    gravity pulls tiles towards increasing y. EMPTY marks a cleared cell that is
    waiting for refill.
    """
    width: int
    height: int
    cells: List[int] = field(default_factory=list)
    num_colors: int = NUM_COLORS

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [EMPTY] * (self.width * self.height)
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Board {self.width}x{self.height} needs {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_flat(cls, values: Sequence[int], width: int, height: int, *, num_colors: int = NUM_COLORS) -> "Board":
        board = cls(width=width, height=height, cells=list(values), num_colors=num_colors)
        for value in board.cells:
            board._check_color(value)
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], *, num_colors: int = NUM_COLORS) -> "Board":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        flat: List[int] = []
        for row in rows:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            flat.extend(row)
        return cls.from_flat(flat, width, height, num_colors=num_colors)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise BoardBoundsError(f"Cell ({x}, {y}) outside {self.width}x{self.height} board")
        return y * self.width + x

    def color_at(self, x: int, y: int) -> int:
        return self.cells[self.index(x, y)]

    def set_color(self, x: int, y: int, color: int) -> None:
        self._check_color(color)
        self.cells[self.index(x, y)] = color

    def swap(self, x1: int, y1: int, x2: int, y2: int) -> None:
        i = self.index(x1, y1)
        j = self.index(x2, y2)
        self.cells[i], self.cells[j] = self.cells[j], self.cells[i]

    @staticmethod
    def is_adjacent(x1: int, y1: int, x2: int, y2: int) -> bool:
        return (abs(x1 - x2) == 1 and y1 == y2) or (abs(y1 - y2) == 1 and x1 == x2)

    def coords(self) -> Iterable[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def empty_cells(self) -> List[Coord]:
        return [(x, y) for (x, y) in self.coords() if self.cells[y * self.width + x] == EMPTY]

    def rows(self) -> List[List[int]]:
        return [self.cells[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def copy(self) -> "Board":
        return Board(width=self.width, height=self.height, cells=list(self.cells), num_colors=self.num_colors)

    def format(self) -> str:
        """Multi-line dump of the colour array, one board row per line."""
        lines = [",".join(str(value) for value in row) for row in self.rows()]
        return "[\n" + ",\n".join(lines) + "]"

    def _check_color(self, color: int) -> None:
        if not 0 <= color <= self.num_colors:
            raise ValueError(f"Colour {color} outside 0..{self.num_colors}")
