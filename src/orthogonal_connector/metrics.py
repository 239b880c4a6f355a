"""
Route quality metrics.

Provides quantitative measures of a routed connector:
- Path length: Total length of the polyline
- Bends: Number of direction changes
- Orthogonality: Whether every segment is horizontal or vertical
- Obstacle violations: Segments cutting into a shape's interior

All metrics work on any sequence of points, not only on ``route`` output.
"""

from __future__ import annotations

from typing import Any, Sequence

from .geometry import Line, Point, Rect, distance
from .simplify import is_collinear


def path_length(points: Sequence[Point]) -> float:
    """
    Total Euclidean length of the polyline.

    Args:
        points: Polyline vertices

    Returns:
        Sum of segment lengths (0 for fewer than two points)
    """
    return sum(distance(points[i], points[i + 1]) for i in range(len(points) - 1))


def count_bends(points: Sequence[Point]) -> int:
    """Number of interior vertices where the polyline changes direction."""
    return sum(
        1
        for i in range(1, len(points) - 1)
        if not is_collinear(points[i - 1], points[i], points[i + 1])
    )


def is_orthogonal(points: Sequence[Point]) -> bool:
    """True if every segment is purely horizontal or purely vertical."""
    return all(
        points[i].x == points[i + 1].x or points[i].y == points[i + 1].y
        for i in range(len(points) - 1)
    )


def obstacle_violations(points: Sequence[Point], obstacles: Sequence[Rect]) -> int:
    """
    Count segments with a non-boundary intersection with any obstacle.

    Segments running along an obstacle's edge are not violations.

    Time Complexity: O(s * o) for s segments and o obstacles
    """
    violations = 0
    for i in range(len(points) - 1):
        seg = Line(points[i], points[i + 1]).as_rect()
        if any(seg.intersects(ob) for ob in obstacles):
            violations += 1
    return violations


def route_quality_summary(
    points: Sequence[Point],
    obstacles: Sequence[Rect] = (),
) -> dict[str, Any]:
    """
    Compute all route metrics at once.

    Args:
        points: Polyline vertices
        obstacles: Shapes the route should avoid

    Returns:
        Dictionary with metric names as keys
    """
    return {
        "length": path_length(points),
        "bends": count_bends(points),
        "segments": max(len(points) - 1, 0),
        "orthogonal": is_orthogonal(points),
        "obstacle_violations": obstacle_violations(points, obstacles),
    }


__all__ = [
    "path_length",
    "count_bends",
    "is_orthogonal",
    "obstacle_violations",
    "route_quality_summary",
]
