"""
Geometry kernel for orthogonal connector routing.

Provides immutable integer value types and the measurements the router
needs:

- Point, Size, Rect, Line: coordinates, extents and segments
- BasicCardinalPoint: compass headings with unit steps
- Direction: alignment of two points (horizontal, vertical or other)

The y axis grows downward, so ``top <= bottom`` and NORTH means smaller y.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from typing_extensions import Self


class BasicCardinalPoint(Enum):
    """Compass heading on the screen plane."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def step(self) -> tuple[int, int]:
        """Unit (dx, dy) vector for this heading."""
        return _STEPS[self]


_STEPS: dict[BasicCardinalPoint, tuple[int, int]] = {
    BasicCardinalPoint.NORTH: (0, -1),
    BasicCardinalPoint.EAST: (1, 0),
    BasicCardinalPoint.SOUTH: (0, 1),
    BasicCardinalPoint.WEST: (-1, 0),
}


class Direction(Enum):
    """Alignment between two points."""

    HORIZONTAL = "horizontal"  # same y
    VERTICAL = "vertical"  # same x
    OTHER = "other"

    def is_orthogonal(self) -> bool:
        """True for HORIZONTAL and VERTICAL."""
        return self is not Direction.OTHER


@dataclass(frozen=True)
class Point:
    """Integer point, hashable by value."""

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> Point:
        """Return a copy moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


@dataclass(frozen=True)
class Size:
    """Integer extent. Non-negative by convention, not enforced."""

    width: int
    height: int


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def direction_of(a: Point, b: Point) -> Direction:
    """Classify how ``a`` and ``b`` are aligned."""
    if a.y == b.y:
        return Direction.HORIZONTAL
    if a.x == b.x:
        return Direction.VERTICAL
    return Direction.OTHER


def heading_of(a: Point, b: Point) -> BasicCardinalPoint | None:
    """
    Compass heading of the move from ``a`` to ``b``.

    Returns None when the points coincide or are not axis-aligned.
    """
    if a == b:
        return None
    if a.y == b.y:
        return BasicCardinalPoint.EAST if b.x > a.x else BasicCardinalPoint.WEST
    if a.x == b.x:
        return BasicCardinalPoint.SOUTH if b.y > a.y else BasicCardinalPoint.NORTH
    return None


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle given by its top-left origin and size.

    Zero width or height is allowed and describes a segment or a point.
    """

    origin: Point
    size: Size

    EMPTY: ClassVar[Rect]

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> Self:
        """Create a rectangle from its four edges."""
        return cls(Point(left, top), Size(right - left, bottom - top))

    @classmethod
    def from_xywh(cls, x: int, y: int, width: int, height: int) -> Self:
        """Create a rectangle from origin and extent."""
        return cls(Point(x, y), Size(width, height))

    @property
    def location(self) -> Point:
        return self.origin

    @property
    def left(self) -> int:
        return self.origin.x

    @property
    def top(self) -> int:
        return self.origin.y

    @property
    def right(self) -> int:
        return self.origin.x + self.size.width

    @property
    def bottom(self) -> int:
        return self.origin.y + self.size.height

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def area(self) -> int:
        return self.size.width * self.size.height

    def is_empty(self) -> bool:
        """True if the rectangle has no area."""
        return self.size.width <= 0 or self.size.height <= 0

    # Corners

    @property
    def north_west(self) -> Point:
        return Point(self.left, self.top)

    @property
    def north_east(self) -> Point:
        return Point(self.right, self.top)

    @property
    def south_east(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def south_west(self) -> Point:
        return Point(self.left, self.bottom)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in NW, NE, SW, SE order."""
        return (self.north_west, self.north_east, self.south_west, self.south_east)

    # Side midpoints

    @property
    def center(self) -> Point:
        return Point(self.left + self.width // 2, self.top + self.height // 2)

    @property
    def north(self) -> Point:
        return Point(self.center.x, self.top)

    @property
    def east(self) -> Point:
        return Point(self.right, self.center.y)

    @property
    def south(self) -> Point:
        return Point(self.center.x, self.bottom)

    @property
    def west(self) -> Point:
        return Point(self.left, self.center.y)

    # Relations

    def contains(self, p: Point) -> bool:
        """Point containment, inclusive on all four edges."""
        return self.left <= p.x <= self.right and self.top <= p.y <= self.bottom

    def contains_rect(self, other: Rect) -> bool:
        """True if ``other`` lies fully inside this rectangle (edges inclusive)."""
        return (
            self.left <= other.left
            and other.right <= self.right
            and self.top <= other.top
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Rect) -> bool:
        """
        Open-interval overlap test.

        Rectangles that only share an edge or a corner do not intersect, so a
        degenerate rectangle lying on this one's boundary does not intersect it.
        """
        return (
            other.left < self.right
            and self.left < other.right
            and other.top < self.bottom
            and self.top < other.bottom
        )

    def inflate(self, horizontal: int, vertical: int) -> Rect:
        """Grow by ``horizontal`` on the left and right, ``vertical`` on top and bottom."""
        return Rect.from_ltrb(
            self.left - horizontal,
            self.top - vertical,
            self.right + horizontal,
            self.bottom + vertical,
        )

    def union(self, other: Rect) -> Rect:
        """Smallest rectangle containing both."""
        return Rect.from_ltrb(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def intersection(self, other: Rect) -> Rect:
        """
        Overlapping region of both rectangles.

        Disjoint inputs give a zero-size rectangle clamped to the nearer edges.
        """
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = max(left, min(self.right, other.right))
        bottom = max(top, min(self.bottom, other.bottom))
        return Rect.from_ltrb(left, top, right, bottom)


Rect.EMPTY = Rect(Point(0, 0), Size(0, 0))


@dataclass(frozen=True)
class Line:
    """Segment between two points."""

    a: Point
    b: Point

    @property
    def direction(self) -> Direction:
        return direction_of(self.a, self.b)

    @property
    def is_horizontal(self) -> bool:
        return self.a.y == self.b.y

    @property
    def is_vertical(self) -> bool:
        return self.a.x == self.b.x

    @property
    def length(self) -> float:
        return distance(self.a, self.b)

    def as_rect(self) -> Rect:
        """Bounding rectangle; degenerate for axis-aligned segments."""
        return Rect.from_ltrb(
            min(self.a.x, self.b.x),
            min(self.a.y, self.b.y),
            max(self.a.x, self.b.x),
            max(self.a.y, self.b.y),
        )


__all__ = [
    "BasicCardinalPoint",
    "Direction",
    "Point",
    "Size",
    "Rect",
    "Line",
    "distance",
    "direction_of",
    "heading_of",
]
