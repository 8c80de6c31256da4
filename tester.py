#!/usr/bin/env python3
"""Simple validator for the maze generator.

The script runs ``generator.py``'s :class:`MazeGenerator` with the provided
parameters and performs a series of sanity checks on the produced maze:

* Every wall joins two grid-adjacent cells, and no pair appears twice.
* Exactly ``size * size - 1`` walls are open.
* The open walls contain no cycle.
* Every cell is reachable from every other cell.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from disjoint_set import UnionFind
import generator
from walls import expected_wall_count


def check_perfect_maze(result: generator.MazeResult) -> None:
    """Raise AssertionError unless ``result`` is a spanning tree of its grid."""
    size = result.size
    cell_count = size * size

    assert len(result.walls) == expected_wall_count(size), (
        f"expected {expected_wall_count(size)} walls, got {len(result.walls)}"
    )
    pairs = {wall.cells for wall in result.walls}
    assert len(pairs) == len(result.walls), "duplicate wall"
    for wall in result.walls:
        a, b = wall.cells
        assert 0 <= a < b < cell_count, f"wall {wall.cells} out of range"
        if wall.is_vertical:
            assert b == a + 1 and b % size != 0, f"vertical wall {wall.cells} is not between row neighbours"
        else:
            assert b == a + size, f"horizontal wall {wall.cells} is not between column neighbours"

    open_walls = result.open_walls
    assert len(open_walls) == cell_count - 1, (
        f"expected {cell_count - 1} open walls, got {len(open_walls)}"
    )

    # a fresh pass: every open wall must join two separate components
    check = UnionFind(cell_count)
    for wall in open_walls:
        assert check.union(wall.cell_a, wall.cell_b), f"open wall {wall.cells} closes a cycle"
    assert check.count == 1, f"maze has {check.count} disconnected regions"
    assert result.draws <= len(result.walls), f"{result.draws} draws for {len(result.walls)} walls"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate generated maze")
    parser.add_argument("size", type=generator.maze_size, help="Grid dimension")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    result = generator.generate_maze(args.size, seed=args.seed)
    check_perfect_maze(result)

    print("All checks passed. Opened", len(result.open_walls), "walls in", result.draws, "draws.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
