"""Path simplification and bend classification."""

from __future__ import annotations

from typing import Optional, Sequence

from .geometry import BasicCardinalPoint, Line, Point, heading_of


def is_collinear(a: Point, b: Point, c: Point) -> bool:
    """True if the three points share an x or a y value."""
    return (a.x == b.x == c.x) or (a.y == b.y == c.y)


def bend_direction(a: Point, b: Point, c: Point) -> Optional[BasicCardinalPoint]:
    """
    Heading taken after ``b`` if the path a-b-c turns there.

    Returns None for a straight pass through ``b`` and for segments that are
    not axis-aligned.
    """
    if is_collinear(a, b, c):
        return None
    if heading_of(a, b) is None:
        return None
    return heading_of(b, c)


def simplify_path(points: Sequence[Point]) -> list[Point]:
    """
    Drop points that do not change the path's direction.

    Consecutive duplicates go first, then the middle point of every
    collinear triple.
    """
    deduped: list[Point] = []
    for p in points:
        if not deduped or deduped[-1] != p:
            deduped.append(p)

    if len(deduped) <= 2:
        return deduped

    result = [deduped[0]]
    for i in range(1, len(deduped) - 1):
        if not is_collinear(result[-1], deduped[i], deduped[i + 1]):
            result.append(deduped[i])
    result.append(deduped[-1])
    return result


def path_to_lines(points: Sequence[Point]) -> list[Line]:
    """Consecutive point pairs as segments."""
    return [Line(points[i], points[i + 1]) for i in range(len(points) - 1)]


__all__ = [
    "is_collinear",
    "bend_direction",
    "simplify_path",
    "path_to_lines",
]
