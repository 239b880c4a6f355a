"""
Orthogonal connector routing.

Routes a connector between two boundary points of two rectangular shapes
using only horizontal and vertical segments:

1. Validate the request and compute the routing area
2. Derive rulers from the margined shapes and connector points
3. Build the grid and drop cells inside a margined shape
4. Collect spots: routable cell corners, connector points, antennas
5. Connect aligned spots whose segment avoids both shapes
6. Run the shortest-path search and merge collinear points

Every call is independent; nothing is cached between calls.

Example:
    opts = OrthogonalConnectorOpts(
        point_a=ConnectorPoint(Rect.from_xywh(0, 0, 100, 100), Side.RIGHT),
        point_b=ConnectorPoint(Rect.from_xywh(300, 0, 100, 100), Side.LEFT),
        shape_margin=10,
    )
    result = route(opts)
    for line in result.connections:
        print(line.a, line.b)
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Optional

from .geometry import Point
from .graph import build_graph
from .grid import build_grid, extract_spots
from .rulers import compute_rulers, routing_area
from .shortestpaths import shortest_path
from .simplify import path_to_lines, simplify_path
from .types import OrthogonalConnectorByproduct, OrthogonalConnectorOpts
from .validation import RoutingWarning, UnroutableError, validate_opts

if TYPE_CHECKING:
    from typing_extensions import Self


def route(opts: OrthogonalConnectorOpts) -> OrthogonalConnectorByproduct:
    """
    Route an orthogonal connector.

    Args:
        opts: Routing request

    Returns:
        Byproduct holding the final polyline (``path``, ``connections``) and
        the rulers, grid, spots and graph edges that produced it

    Raises:
        InvalidConfigurationError: If the request is malformed
        UnroutableError: If the shapes leave no path between the points
    """
    limit = validate_opts(opts)

    a, b = opts.point_a, opts.point_b
    margin = opts.shape_margin
    inflated_a = a.shape.inflate(margin, margin)
    inflated_b = b.shape.inflate(margin, margin)
    obstacles = [inflated_a, inflated_b]

    if inflated_a.intersects(inflated_b):
        warnings.warn(
            "margined shapes overlap; the connector may be unroutable",
            RoutingWarning,
            stacklevel=2,
        )

    area = routing_area(inflated_a, inflated_b, opts.global_bounds_margin, limit)

    start, end = a.location, b.location
    antenna_a, antenna_b = a.antenna(margin), b.antenna(margin)

    v_rulers, h_rulers = compute_rulers(obstacles, [start, end], area)
    grid = build_grid(v_rulers, h_rulers, obstacles)
    spots = extract_spots(grid.cells, [start, end, antenna_a, antenna_b])
    graph = build_graph(spots, obstacles, stubs=[(start, antenna_a), (end, antenna_b)])

    source = graph.get(start)
    target = graph.get(end)
    if source is None or target is None:
        raise UnroutableError("connector point is not part of the routing graph")

    nodes = shortest_path(graph, source, target, opts.bend_penalty)
    path = simplify_path([graph.point(i) for i in nodes])

    return OrthogonalConnectorByproduct(
        h_rulers=h_rulers,
        v_rulers=v_rulers,
        spots=spots,
        grid=grid.cells,
        blocked=grid.blocked,
        edges=list(graph.edges()),
        path=path,
        connections=path_to_lines(path),
    )


class OrthogonalConnector:
    """
    Holds a routing request and the result of its last run.

    Example:
        connector = OrthogonalConnector(opts).run()
        print(connector.path)
    """

    def __init__(self, opts: OrthogonalConnectorOpts) -> None:
        self._opts = opts
        self._byproduct: Optional[OrthogonalConnectorByproduct] = None

    @property
    def opts(self) -> OrthogonalConnectorOpts:
        """Get the routing request."""
        return self._opts

    @property
    def byproduct(self) -> Optional[OrthogonalConnectorByproduct]:
        """Result of the last ``run``, or None before the first one."""
        return self._byproduct

    @property
    def path(self) -> list[Point]:
        """Routed polyline; empty before ``run``."""
        if self._byproduct is None:
            return []
        return self._byproduct.path

    def validate(self) -> Self:
        """
        Validate the request without routing.

        Raises:
            InvalidConfigurationError: If the request is malformed
        """
        validate_opts(self._opts)
        return self

    def run(self) -> Self:
        """
        Route the connector and keep the result.

        Raises:
            InvalidConfigurationError: If the request is malformed
            UnroutableError: If no path exists
        """
        self._byproduct = route(self._opts)
        return self


__all__ = [
    "route",
    "OrthogonalConnector",
]
