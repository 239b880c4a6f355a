"""
Ruler generation.

Rulers are the distinct x values (vertical rulers) and y values (horizontal
rulers) that cut the plane into routing cells. They come from the margined
shape edges, the connector points and the edges of the routing area (the
inflated global bounds when given). Any
bend of a shortest orthogonal path can sit on one of them, since every
obstacle and endpoint is axis-aligned.
"""

from __future__ import annotations

import warnings
from typing import Optional, Sequence

import numpy as np

from .geometry import Point, Rect
from .validation import RoutingWarning


def routing_area(
    inflated_a: Rect,
    inflated_b: Rect,
    global_bounds_margin: int,
    limit: Optional[Rect] = None,
) -> Rect:
    """
    Compute the rectangle the route may use.

    Unbounded, the area is the union of both margined shapes grown by
    ``global_bounds_margin``. With ``limit`` (the already inflated global
    bounds) the area is ``limit`` itself, so its edges become rulers and
    nothing outside it survives.

    Args:
        inflated_a: First shape with its margin applied
        inflated_b: Second shape with its margin applied
        global_bounds_margin: Room added around the shapes
        limit: Optional hard bounds

    Returns:
        The routing area
    """
    if limit is None:
        return inflated_a.union(inflated_b).inflate(global_bounds_margin, global_bounds_margin)

    for name, shape in (("first", inflated_a), ("second", inflated_b)):
        if not limit.contains_rect(shape):
            warnings.warn(
                f"global bounds clip the {name} shape's margined bounds; "
                "the route cannot pass around that part of it",
                RoutingWarning,
                stacklevel=3,
            )
    return limit


def compute_rulers(
    obstacles: Sequence[Rect],
    points: Sequence[Point],
    area: Rect,
) -> tuple[list[int], list[int]]:
    """
    Derive the vertical and horizontal rulers.

    Args:
        obstacles: Margined shapes
        points: Connector point locations
        area: Routing area; rulers outside it are dropped

    Returns:
        (vertical, horizontal) rulers as sorted, unique x and y values
    """
    xs: list[int] = [area.left, area.right]
    ys: list[int] = [area.top, area.bottom]

    for b in obstacles:
        xs.extend((b.left, b.right))
        ys.extend((b.top, b.bottom))

    for p in points:
        xs.append(p.x)
        ys.append(p.y)

    return (
        _clip_unique(xs, area.left, area.right),
        _clip_unique(ys, area.top, area.bottom),
    )


def _clip_unique(values: list[int], low: int, high: int) -> list[int]:
    """Sorted unique values within [low, high]."""
    arr = np.unique(np.asarray(values, dtype=np.int64))
    arr = arr[(arr >= low) & (arr <= high)]
    return [int(v) for v in arr]


__all__ = [
    "routing_area",
    "compute_rulers",
]
