"""
Input validation and error types for connector routing.

Provides the exception hierarchy raised by ``route`` and the functions that
check a request before any grid is built. Raises descriptive exceptions on
invalid input.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from .geometry import Rect
from .types import ConnectorPoint, OrthogonalConnectorOpts, Side


class RoutingError(ValueError):
    """Base exception for connector routing errors."""

    pass


class InvalidConfigurationError(RoutingError):
    """Raised when a routing request is malformed."""

    pass


class UnroutableError(RoutingError):
    """Raised when no orthogonal path joins the two connector points."""

    pass


class RoutingWarning(UserWarning):
    """Warning about a request that is valid but likely to route poorly."""

    pass


def validate_rect(rect: Rect, name: str) -> Rect:
    """
    Validate that a rectangle has non-negative size.

    Args:
        rect: Rectangle to check
        name: Label used in the error message

    Returns:
        The rectangle

    Raises:
        InvalidConfigurationError: If width or height is negative
    """
    if not isinstance(rect, Rect):
        raise InvalidConfigurationError(f"{name} must be a Rect, got {type(rect).__name__}")
    if rect.width < 0 or rect.height < 0:
        raise InvalidConfigurationError(
            f"{name} must have non-negative size, got {rect.width}x{rect.height}"
        )
    return rect


def validate_connector_point(point: ConnectorPoint, name: str = "connector") -> ConnectorPoint:
    """
    Validate a connector point.

    Args:
        point: Connector to check
        name: Label used in error messages

    Returns:
        The connector point

    Raises:
        InvalidConfigurationError: If the side is unknown, the shape is
            malformed or the distance is outside [0, 1]
    """
    if not isinstance(point.side, Side):
        raise InvalidConfigurationError(f"{name} side must be a Side, got {point.side!r}")
    validate_rect(point.shape, f"{name} shape")
    d = point.distance
    if not isinstance(d, (int, float)) or math.isnan(d) or d < 0 or d > 1:
        raise InvalidConfigurationError(f"{name} distance must be in [0, 1], got {d}")
    return point


def validate_margin(margin: Any, name: str) -> int:
    """
    Validate that a margin is a non-negative integer.

    Raises:
        InvalidConfigurationError: If the margin is not an int or is negative
    """
    if isinstance(margin, bool) or not isinstance(margin, int):
        raise InvalidConfigurationError(f"{name} must be an int, got {type(margin).__name__}")
    if margin < 0:
        raise InvalidConfigurationError(f"{name} must be >= 0, got {margin}")
    return margin


def validate_bend_penalty(penalty: float) -> float:
    """
    Validate the per-bend cost.

    Raises:
        InvalidConfigurationError: If the penalty is negative or not finite
    """
    if isinstance(penalty, bool) or not isinstance(penalty, (int, float)):
        raise InvalidConfigurationError(
            f"bend_penalty must be a number, got {type(penalty).__name__}"
        )
    if math.isnan(penalty) or math.isinf(penalty) or penalty < 0:
        raise InvalidConfigurationError(f"bend_penalty must be finite and >= 0, got {penalty}")
    return float(penalty)


def validate_global_bounds(
    bounds: Optional[Rect],
    margin: int,
    point_a: ConnectorPoint,
    point_b: ConnectorPoint,
    shape_margin: int,
) -> Optional[Rect]:
    """
    Validate the global bounds against both connector points.

    The bounds are inflated by ``margin`` first. Both connector locations and
    their antennas (the locations pushed out by ``shape_margin``) must lie
    inside.

    Returns:
        The inflated bounds, or None when unbounded

    Raises:
        InvalidConfigurationError: If the bounds exclude a connector point
    """
    if bounds is None:
        return None
    validate_rect(bounds, "global_bounds")
    limit = bounds.inflate(margin, margin)
    for name, point in (("point_a", point_a), ("point_b", point_b)):
        loc = point.location
        if not limit.contains(loc):
            raise InvalidConfigurationError(
                f"global_bounds {_ltrb(limit)} exclude {name} at ({loc.x}, {loc.y})"
            )
        antenna = point.antenna(shape_margin)
        if not limit.contains(antenna):
            raise InvalidConfigurationError(
                f"global_bounds {_ltrb(limit)} exclude the margined {name} "
                f"at ({antenna.x}, {antenna.y})"
            )
    return limit


def validate_opts(opts: OrthogonalConnectorOpts) -> Optional[Rect]:
    """
    Validate a complete routing request.

    Returns:
        The inflated global bounds, or None when unbounded

    Raises:
        InvalidConfigurationError: On the first problem found
    """
    validate_connector_point(opts.point_a, "point_a")
    validate_connector_point(opts.point_b, "point_b")
    validate_margin(opts.shape_margin, "shape_margin")
    validate_margin(opts.global_bounds_margin, "global_bounds_margin")
    validate_bend_penalty(opts.bend_penalty)
    return validate_global_bounds(
        opts.global_bounds,
        opts.global_bounds_margin,
        opts.point_a,
        opts.point_b,
        opts.shape_margin,
    )


def _ltrb(rect: Rect) -> str:
    return f"({rect.left}, {rect.top}, {rect.right}, {rect.bottom})"


__all__ = [
    "RoutingError",
    "InvalidConfigurationError",
    "UnroutableError",
    "RoutingWarning",
    "validate_rect",
    "validate_connector_point",
    "validate_margin",
    "validate_bend_penalty",
    "validate_global_bounds",
    "validate_opts",
]
