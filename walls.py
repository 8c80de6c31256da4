"""Interior walls of a square grid.

Cells are numbered row-major: ``cell = row * size + col``. A vertical wall
separates left/right neighbours, a horizontal wall separates top/bottom
neighbours. Border walls are never part of the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

VERTICAL = "vertical"
HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class WallState:
    """Final state of a wall, as stored in a finished maze."""
    cell_a: int
    cell_b: int
    orientation: str
    is_open: bool

    @property
    def is_vertical(self) -> bool:
        return self.orientation == VERTICAL

    @property
    def cells(self) -> Tuple[int, int]:
        return self.cell_a, self.cell_b


@dataclass
class Wall:
    """Candidate edge between two grid-adjacent cells, ``cell_a < cell_b``."""
    cell_a: int
    cell_b: int
    orientation: str
    is_open: bool = False

    def __post_init__(self):
        if not self.cell_a < self.cell_b:
            raise ValueError(f"wall cells must be ordered, got {(self.cell_a, self.cell_b)}")
        if self.orientation not in (VERTICAL, HORIZONTAL):
            raise ValueError(f"unknown wall orientation {self.orientation!r}")

    @property
    def is_vertical(self) -> bool:
        return self.orientation == VERTICAL

    @property
    def cells(self) -> Tuple[int, int]:
        return self.cell_a, self.cell_b

    def open(self) -> None:
        if self.is_open:
            raise ValueError(f"wall {self.cells} is already open")
        self.is_open = True

    def snapshot(self) -> WallState:
        return WallState(self.cell_a, self.cell_b, self.orientation, self.is_open)


def expected_wall_count(size: int) -> int:
    return 2 * size * (size - 1)


def build_walls(size: int) -> List[Wall]:
    """Enumerate every interior wall of a ``size`` x ``size`` grid.

    Row by row: the vertical walls inside the row, then the horizontal walls
    between that row and the next one.

    Args:
        size: grid dimension, at least 1

    Returns:
        closed walls, ``2 * size * (size - 1)`` of them
    """
    if size < 1:
        raise ValueError(f"grid size must be >= 1, got {size}")

    walls: List[Wall] = []
    for row in range(size):
        first = row * size
        for col in range(size - 1):
            walls.append(Wall(first + col, first + col + 1, VERTICAL))
        if row == size - 1:
            break
        for col in range(size):
            walls.append(Wall(first + col, first + col + size, HORIZONTAL))
    return walls


class WallCatalog:
    def __init__(self, size: int, walls: Optional[List[Wall]] = None):
        self.size = size
        self.walls: List[Wall] = build_walls(size) if walls is None else list(walls)
        self._by_cells: Dict[Tuple[int, int], Wall] = {w.cells: w for w in self.walls}
        if len(self._by_cells) != len(self.walls):
            raise ValueError("duplicate wall in catalog")

    def __len__(self) -> int:
        return len(self.walls)

    def __iter__(self) -> Iterator[Wall]:
        return iter(self.walls)

    def lookup(self, a: int, b: int) -> Wall:
        """Wall between cells ``a`` and ``b`` in either order; KeyError if none."""
        return self._by_cells[(min(a, b), max(a, b))]

    def open_walls(self) -> List[Wall]:
        return [w for w in self.walls if w.is_open]
