"""
Routing grid and spot extraction.

Consecutive ruler pairs span a grid of cells over the routing area. Cells
that overlap a margined shape are blocked; the rest is the routable area.
The corners of routable cells, together with the connector points and their
antennas, are the spots a path may bend at.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from .geometry import Point, Rect


@dataclass
class Grid:
    """
    Cells of the routing grid.

    Attributes:
        rows: Number of cell rows (len(horizontal rulers) - 1)
        cols: Number of cell columns (len(vertical rulers) - 1)
        cells: Routable cells in row-major order
        blocked: Cells overlapping an obstacle, in row-major order
    """

    rows: int
    cols: int
    cells: list[Rect] = field(default_factory=list)
    blocked: list[Rect] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)


def build_grid(
    v_rulers: Sequence[int],
    h_rulers: Sequence[int],
    obstacles: Sequence[Rect],
) -> Grid:
    """
    Build grid cells from rulers and split them into routable and blocked.

    A cell is blocked if it intersects an obstacle under the open-interval
    test, so cells that only touch an obstacle's edge stay routable.

    Args:
        v_rulers: Sorted x values
        h_rulers: Sorted y values
        obstacles: Margined shapes

    Returns:
        Grid with routable and blocked cells
    """
    cols = max(len(v_rulers) - 1, 0)
    rows = max(len(h_rulers) - 1, 0)
    grid = Grid(rows=rows, cols=cols)
    if rows == 0 or cols == 0:
        return grid

    xs = np.asarray(v_rulers, dtype=np.int64)
    ys = np.asarray(h_rulers, dtype=np.int64)

    # shape (rows, cols)
    left, top = np.meshgrid(xs[:-1], ys[:-1])
    right, bottom = np.meshgrid(xs[1:], ys[1:])

    mask = np.zeros((rows, cols), dtype=bool)
    for ob in obstacles:
        mask |= (ob.left < right) & (left < ob.right) & (ob.top < bottom) & (top < ob.bottom)

    for r in range(rows):
        for c in range(cols):
            cell = Rect.from_ltrb(
                int(left[r, c]), int(top[r, c]), int(right[r, c]), int(bottom[r, c])
            )
            if mask[r, c]:
                grid.blocked.append(cell)
            else:
                grid.cells.append(cell)

    return grid


def extract_spots(cells: Iterable[Rect], extra: Iterable[Point] = ()) -> list[Point]:
    """
    Collect candidate waypoints.

    Args:
        cells: Routable cells; each contributes its four corners
        extra: Points that are always spots (connector points, antennas)

    Returns:
        Unique spots, in first-seen order
    """
    seen: set[Point] = set()
    spots: list[Point] = []

    def add(p: Point) -> None:
        if p not in seen:
            seen.add(p)
            spots.append(p)

    for cell in cells:
        for corner in cell.corners():
            add(corner)
    for p in extra:
        add(p)

    return spots


__all__ = [
    "Grid",
    "build_grid",
    "extract_spots",
]
