"""
orthogonal-connector: right-angle connector routing between two boxes.

This package computes a polyline made of horizontal and vertical segments
that joins a point on one rectangle's boundary to a point on another's,
keeping a clearance margin around both shapes and staying inside optional
global bounds.

Pipeline:
- rulers: distinct x/y values cutting the plane around the shapes
- grid: cells between rulers, minus those inside a margined shape
- spots: candidate waypoints at routable cell corners
- graph: axis-aligned edges between spots that avoid the shapes
- shortestpaths: Dijkstra over the graph, fewest bends on ties
- simplify: merge collinear points into the final polyline
"""

__version__ = "0.1.0"

# Geometry kernel
from .geometry import (
    BasicCardinalPoint,
    Direction,
    Line,
    Point,
    Rect,
    Size,
    direction_of,
    distance,
    heading_of,
)

# Route quality metrics
from .metrics import (
    count_bends,
    is_orthogonal,
    obstacle_violations,
    path_length,
    route_quality_summary,
)

# Entry points
from .router import OrthogonalConnector, route
from .simplify import bend_direction, simplify_path
from .types import (
    ConnectorPoint,
    OrthogonalConnectorByproduct,
    OrthogonalConnectorOpts,
    Side,
)

# Errors and validation
from .validation import (
    InvalidConfigurationError,
    RoutingError,
    RoutingWarning,
    UnroutableError,
    validate_opts,
)

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Point",
    "Size",
    "Rect",
    "Line",
    "BasicCardinalPoint",
    "Direction",
    "distance",
    "direction_of",
    "heading_of",
    # Request / response
    "Side",
    "ConnectorPoint",
    "OrthogonalConnectorOpts",
    "OrthogonalConnectorByproduct",
    # Routing
    "route",
    "OrthogonalConnector",
    "simplify_path",
    "bend_direction",
    # Metrics
    "path_length",
    "count_bends",
    "is_orthogonal",
    "obstacle_violations",
    "route_quality_summary",
    # Errors
    "RoutingError",
    "InvalidConfigurationError",
    "UnroutableError",
    "RoutingWarning",
    "validate_opts",
]
