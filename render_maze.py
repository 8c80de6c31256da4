#!/usr/bin/env python3
"""Maze rendering helpers.

``render`` turns the final wall states of a maze into a bordered ASCII grid;
``plot_maze`` draws the same maze with matplotlib for a quick preview.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
import numpy as np

from walls import Wall, WallState

# wall glyphs
VERTICAL_WALL = "|"
HORIZONTAL_WALL = "--"
EMPTY_VERTICAL = " "
EMPTY_HORIZONTAL = "  "
CORNER = "+"
CELL = "  "


def _open_lookup(walls: Iterable[Union[Wall, WallState]]) -> Dict[Tuple[int, int], bool]:
    return {(min(w.cells), max(w.cells)): w.is_open for w in walls}


def _border(size: int, gap: int = -1) -> str:
    segments = [EMPTY_HORIZONTAL if col == gap else HORIZONTAL_WALL for col in range(size)]
    return CORNER + CORNER.join(segments) + CORNER


def render(size: int, walls: Iterable[Union[Wall, WallState]], openings: bool = False) -> str:
    """Render wall states of a ``size`` x ``size`` maze as text.

    Args:
        size: grid dimension
        walls: every interior wall with its final state; walls missing from
            the collection are drawn closed
        openings: leave a gap in the border above the first cell and below
            the last one

    Returns:
        the maze, lines separated by ``\\n`` without a trailing newline
    """
    is_open = _open_lookup(walls)

    def glyph(a: int, b: int, closed: str, empty: str) -> str:
        return empty if is_open.get((a, b), False) else closed

    lines: List[str] = [_border(size, 0 if openings else -1)]
    for row in range(size):
        first = row * size
        line = VERTICAL_WALL
        for col in range(size - 1):
            line += CELL + glyph(first + col, first + col + 1, VERTICAL_WALL, EMPTY_VERTICAL)
        lines.append(line + CELL + VERTICAL_WALL)

        if row < size - 1:
            line = CORNER
            for col in range(size):
                line += glyph(first + col, first + col + size, HORIZONTAL_WALL, EMPTY_HORIZONTAL) + CORNER
            lines.append(line)
    lines.append(_border(size, size - 1 if openings else -1))
    return "\n".join(lines)


def wall_segments(size: int, walls: Iterable[Union[Wall, WallState]], openings: bool = False) -> np.ndarray:
    """Line segments of every closed wall, border included.

    Cell ``(row, col)`` covers ``[col, col + 1] x [size - row - 1, size - row]``
    so that row 0 is at the top of the plot.

    Returns:
        array of shape ``(n, 2, 2)``
    """
    segments = []
    for wall in walls:
        if wall.is_open:
            continue
        row, col = divmod(wall.cell_a, size)
        top = size - row
        if wall.is_vertical:
            segments.append(((col + 1, top - 1), (col + 1, top)))
        else:
            segments.append(((col, top - 1), (col + 1, top - 1)))

    for i in range(size):
        if not (openings and i == 0):
            segments.append(((i, size), (i + 1, size)))
        if not (openings and i == size - 1):
            segments.append(((i, 0), (i + 1, 0)))
        segments.append(((0, i), (0, i + 1)))
        segments.append(((size, i), (size, i + 1)))
    return np.array(segments, dtype=float).reshape(-1, 2, 2)


def plot_maze(result, ax=None, openings: bool = False):
    """Draw the maze on a matplotlib axes and return the axes."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    segments = wall_segments(result.size, result.walls, openings)
    ax.add_collection(LineCollection(segments, colors="black", linewidths=2))
    ax.set_xlim(-0.5, result.size + 0.5)
    ax.set_ylim(-0.5, result.size + 0.5)
    ax.set_aspect("equal")
    ax.set_axis_off()
    ax.set_title(f"Maze {result.size}x{result.size}")
    return ax


def show_maze(result, openings: bool = False) -> None:
    plot_maze(result, openings=openings)
    plt.tight_layout()
    plt.show()
