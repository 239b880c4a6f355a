"""
Routing graph over spots.

Spots are interned into a dense node arena keyed by coordinate; edges refer
to nodes by index. Two spots are joined when they share an x or a y value
and the straight segment between them stays out of every obstacle's
interior.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Iterator, Optional, Sequence

from .geometry import Direction, Line, Point, Rect, direction_of, distance


class PointGraph:
    """
    Undirected weighted graph whose nodes are unique points.

    Adjacency lists keep edges in insertion order, which the pathfinder uses
    to break ties.
    """

    def __init__(self) -> None:
        self._points: list[Point] = []
        self._nodes: dict[Point, int] = {}
        self._adj: list[list[tuple[int, float]]] = []
        self._edges: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._points)

    def add(self, p: Point) -> int:
        """Intern a point and return its node index."""
        idx = self._nodes.get(p)
        if idx is None:
            idx = len(self._points)
            self._points.append(p)
            self._nodes[p] = idx
            self._adj.append([])
        return idx

    def has(self, p: Point) -> bool:
        return p in self._nodes

    def get(self, p: Point) -> Optional[int]:
        return self._nodes.get(p)

    def point(self, idx: int) -> Point:
        return self._points[idx]

    def connect(self, a: Point, b: Point) -> None:
        """
        Join two existing points with reciprocal edges weighted by distance.

        Raises:
            KeyError: If either point was never added
        """
        ia = self._nodes[a]
        ib = self._nodes[b]
        weight = distance(a, b)
        self._adj[ia].append((ib, weight))
        self._adj[ib].append((ia, weight))
        self._edges.append((ia, ib))

    def neighbors(self, idx: int) -> list[tuple[int, float]]:
        """(node, weight) pairs adjacent to ``idx``."""
        return self._adj[idx]

    def direction_of(self, a: int, b: int) -> Direction:
        return direction_of(self._points[a], self._points[b])

    def edges(self) -> Iterator[Line]:
        """Each undirected edge once, in insertion order."""
        for ia, ib in self._edges:
            yield Line(self._points[ia], self._points[ib])

    @property
    def edge_count(self) -> int:
        return len(self._edges)


def segment_is_clear(a: Point, b: Point, obstacles: Sequence[Rect]) -> bool:
    """True if the segment a-b does not cut into any obstacle's interior."""
    seg = Line(a, b).as_rect()
    return not any(seg.intersects(ob) for ob in obstacles)


def build_graph(
    spots: Sequence[Point],
    obstacles: Sequence[Rect],
    stubs: Iterable[tuple[Point, Point]] = (),
) -> PointGraph:
    """
    Build the routing graph.

    Every pair of spots on the same row or column becomes an edge unless
    the segment between them crosses an obstacle. Rows are visited top to
    bottom, then columns left to right.

    Args:
        spots: Unique candidate waypoints
        obstacles: Margined shapes
        stubs: (connector, antenna) pairs joined without the obstacle test,
            since they run through the connector's own margin

    Returns:
        The routing graph
    """
    graph = PointGraph()
    rows: dict[int, list[Point]] = defaultdict(list)
    cols: dict[int, list[Point]] = defaultdict(list)

    for p in spots:
        graph.add(p)
        rows[p.y].append(p)
        cols[p.x].append(p)

    for key in sorted(rows):
        _connect_line(graph, sorted(rows[key], key=lambda p: p.x), obstacles)
    for key in sorted(cols):
        _connect_line(graph, sorted(cols[key], key=lambda p: p.y), obstacles)

    for connector, antenna in stubs:
        if connector != antenna:
            graph.add(connector)
            graph.add(antenna)
            graph.connect(connector, antenna)

    return graph


def _connect_line(graph: PointGraph, line: list[Point], obstacles: Sequence[Rect]) -> None:
    for i, a in enumerate(line):
        for b in line[i + 1 :]:
            if segment_is_clear(a, b, obstacles):
                graph.connect(a, b)


__all__ = [
    "PointGraph",
    "build_graph",
    "segment_is_clear",
]
