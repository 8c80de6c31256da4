#!/usr/bin/env python3
"""Perfect maze generation with a randomized Kruskal's algorithm.

Every interior wall of a square grid is a candidate edge. Walls are drawn in
random order; a wall is knocked down only when the two cells it separates are
not yet connected, so the open walls end up forming a spanning tree: exactly
one path between any two cells.
"""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Set, Tuple

from disjoint_set import UnionFind
from walls import Wall, WallCatalog, WallState
import render_maze

GENERATING = "generating"
COMPLETE = "complete"


class ConfigError(ValueError):
    """Invalid maze configuration."""


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class MazeConfig:
    """Settings for one maze generation run."""
    size: int
    seed: Optional[int] = None
    openings: bool = False  # entrance top-left, exit bottom-right
    verbose: bool = False

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ConfigError(f"maze size must be an integer, got {self.size!r}")
        if self.size < 1:
            raise ConfigError(f"maze size must be >= 1, got {self.size}")


@dataclass(frozen=True)
class MazeResult:
    size: int
    walls: Tuple[WallState, ...]
    draws: int

    @property
    def open_walls(self) -> List[WallState]:
        return [w for w in self.walls if w.is_open]

    def open_pairs(self) -> Set[Tuple[int, int]]:
        return {w.cells for w in self.walls if w.is_open}


class MazeGenerator:
    def __init__(self, config: MazeConfig, rng: Optional[RandomSource] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)

        cell_count = config.size * config.size
        self.cells = UnionFind(cell_count)
        self.catalog = WallCatalog(config.size)
        self.pool: List[Wall] = list(self.catalog)
        self.components_remaining = cell_count
        self.draws = 0
        self.result: Optional[MazeResult] = None

    @property
    def state(self) -> str:
        return GENERATING if self.components_remaining > 1 else COMPLETE

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message, file=sys.stderr)

    def draw_wall(self) -> Wall:
        """Remove and return a uniformly random wall from the pool."""
        index = self.rng.randrange(len(self.pool))
        last = len(self.pool) - 1
        self.pool[index], self.pool[last] = self.pool[last], self.pool[index]
        self.draws += 1
        return self.pool.pop()

    def step(self) -> bool:
        """Process one random wall. Returns True if the wall was opened."""
        wall = self.draw_wall()
        if self.cells.is_connected(wall.cell_a, wall.cell_b):
            return False

        wall.open()
        self.cells.union(wall.cell_a, wall.cell_b)
        self.components_remaining -= 1
        self._log(f"  >> opened {wall.orientation} wall {wall.cells}, components left: {self.components_remaining}")
        return True

    def generate(self) -> MazeResult:
        if self.result is not None:
            raise RuntimeError("maze already generated; create a new MazeGenerator")

        self._log(f"generating maze: size={self.config.size}, seed={self.config.seed}, candidate walls: {len(self.catalog)}")
        while self.state == GENERATING:
            self.step()

        walls = tuple(wall.snapshot() for wall in self.catalog)
        self.result = MazeResult(self.config.size, walls, self.draws)
        self._log(
            f"maze complete: {self.draws} draws, {len(self.result.open_walls)} walls opened, "
            f"{len(self.pool)} walls never drawn"
        )
        return self.result


def generate_maze(size: int, seed: Optional[int] = None, rng: Optional[RandomSource] = None) -> MazeResult:
    return MazeGenerator(MazeConfig(size=size, seed=seed), rng).generate()


def maze_size(value: str) -> int:
    """argparse type: a positive grid dimension."""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid maze size {value!r}: not an integer")
    if size < 1:
        raise argparse.ArgumentTypeError(f"invalid maze size {size}: must be >= 1")
    return size


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze with randomized Kruskal's algorithm")
    parser.add_argument("size", type=maze_size, help="Grid dimension (size x size cells)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--openings", action="store_true", help="Open an entrance top-left and an exit bottom-right")
    parser.add_argument("--plot", action="store_true", help="Also show the maze with matplotlib")
    parser.add_argument("--verbose", action="store_true", help="Print progress to stderr")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = MazeConfig(size=args.size, seed=args.seed, openings=args.openings, verbose=args.verbose)
    result = MazeGenerator(config).generate()

    print(render_maze.render(result.size, result.walls, openings=config.openings))
    if args.plot:
        render_maze.show_maze(result, openings=config.openings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
