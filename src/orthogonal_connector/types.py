"""
Request and response types for orthogonal connector routing.

Provides:
- Side: which edge of a shape a connector attaches to
- ConnectorPoint: a shape, a side and a relative position along it
- OrthogonalConnectorOpts: a routing request
- OrthogonalConnectorByproduct: the routed path plus intermediate geometry
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .geometry import BasicCardinalPoint, Line, Point, Rect


class Side(Enum):
    """Side of a shape where a connector attaches."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def outward(self) -> BasicCardinalPoint:
        """Heading that leaves the shape through this side."""
        return _OUTWARD[self]

    def is_horizontal(self) -> bool:
        """True for TOP and BOTTOM, whose positions run along x."""
        return self in (Side.TOP, Side.BOTTOM)


_OUTWARD: dict[Side, BasicCardinalPoint] = {
    Side.TOP: BasicCardinalPoint.NORTH,
    Side.RIGHT: BasicCardinalPoint.EAST,
    Side.BOTTOM: BasicCardinalPoint.SOUTH,
    Side.LEFT: BasicCardinalPoint.WEST,
}


@dataclass(frozen=True)
class ConnectorPoint:
    """
    A point on a shape's boundary where a connector leaves or enters.

    ``distance`` is the relative position along ``side`` in [0, 1], measured
    from the side's left end (TOP/BOTTOM) or top end (LEFT/RIGHT).
    """

    shape: Rect
    side: Side
    distance: float = 0.5

    @classmethod
    def at_offset(cls, shape: Rect, side: Side, offset: float) -> ConnectorPoint:
        """
        Create a connector from an absolute offset along the side.

        A zero-length side maps every offset to 0.
        """
        length = shape.width if side.is_horizontal() else shape.height
        relative = offset / length if length else 0.0
        return cls(shape, side, relative)

    @property
    def location(self) -> Point:
        """
        Resolved boundary point.

        Offsets are floored, like ``Rect.center``, so ``distance=0.5`` lands
        on the shape's side midpoint for odd lengths too.
        """
        b = self.shape
        if self.side == Side.TOP:
            return Point(b.left + _offset(b.width, self.distance), b.top)
        elif self.side == Side.BOTTOM:
            return Point(b.left + _offset(b.width, self.distance), b.bottom)
        elif self.side == Side.LEFT:
            return Point(b.left, b.top + _offset(b.height, self.distance))
        else:  # RIGHT
            return Point(b.right, b.top + _offset(b.height, self.distance))

    def antenna(self, margin: int) -> Point:
        """Location pushed outward through the side by ``margin``."""
        dx, dy = self.side.outward.step
        return self.location.translate(dx * margin, dy * margin)


def _offset(length: int, distance: float) -> int:
    # Inner round drops float noise such as 100 * 0.29 == 28.999999999999996
    return math.floor(round(length * distance, 9))


@dataclass(frozen=True)
class OrthogonalConnectorOpts:
    """
    A routing request.

    Attributes:
        point_a: Where the connector starts
        point_b: Where the connector ends
        shape_margin: Clearance kept around both shapes
        global_bounds_margin: Extra room around the shapes (and around
            ``global_bounds`` when given)
        global_bounds: Optional rectangle the route must stay inside;
            None means unbounded
        bend_penalty: Extra cost per bend added to the path length
    """

    point_a: ConnectorPoint
    point_b: ConnectorPoint
    shape_margin: int = 0
    global_bounds_margin: int = 0
    global_bounds: Optional[Rect] = None
    bend_penalty: float = 0.0


@dataclass
class OrthogonalConnectorByproduct:
    """
    Result of a routing call.

    ``path`` and ``connections`` hold the final polyline; the rest is the
    intermediate geometry that produced it.
    """

    h_rulers: list[int] = field(default_factory=list)  # y values
    v_rulers: list[int] = field(default_factory=list)  # x values
    spots: list[Point] = field(default_factory=list)
    grid: list[Rect] = field(default_factory=list)  # routable cells
    blocked: list[Rect] = field(default_factory=list)  # cells inside a margined shape
    edges: list[Line] = field(default_factory=list)  # routing graph edges
    path: list[Point] = field(default_factory=list)
    connections: list[Line] = field(default_factory=list)


__all__ = [
    "Side",
    "ConnectorPoint",
    "OrthogonalConnectorOpts",
    "OrthogonalConnectorByproduct",
]
