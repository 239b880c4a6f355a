"""Tests for the routing graph."""

from __future__ import annotations

import pytest

from orthogonal_connector.geometry import Direction, Line, Point, Rect
from orthogonal_connector.graph import PointGraph, build_graph, segment_is_clear


class TestPointGraph:
    def test_add_interns_points(self) -> None:
        g = PointGraph()
        a = g.add(Point(0, 0))
        b = g.add(Point(10, 0))
        assert g.add(Point(0, 0)) == a
        assert a != b
        assert len(g) == 2

    def test_has_and_get(self) -> None:
        g = PointGraph()
        idx = g.add(Point(3, 4))
        assert g.has(Point(3, 4))
        assert g.get(Point(3, 4)) == idx
        assert not g.has(Point(4, 3))
        assert g.get(Point(4, 3)) is None
        assert g.point(idx) == Point(3, 4)

    def test_connect_is_reciprocal(self) -> None:
        g = PointGraph()
        a = g.add(Point(0, 0))
        b = g.add(Point(0, 30))
        g.connect(Point(0, 0), Point(0, 30))
        assert g.neighbors(a) == [(b, 30.0)]
        assert g.neighbors(b) == [(a, 30.0)]
        assert g.edge_count == 1
        assert list(g.edges()) == [Line(Point(0, 0), Point(0, 30))]

    def test_connect_unknown_point_raises(self) -> None:
        g = PointGraph()
        g.add(Point(0, 0))
        with pytest.raises(KeyError):
            g.connect(Point(0, 0), Point(5, 0))

    def test_direction_of(self) -> None:
        g = PointGraph()
        a = g.add(Point(0, 0))
        b = g.add(Point(10, 0))
        c = g.add(Point(10, 10))
        assert g.direction_of(a, b) == Direction.HORIZONTAL
        assert g.direction_of(b, c) == Direction.VERTICAL
        assert g.direction_of(a, c) == Direction.OTHER


class TestSegmentIsClear:
    def test_through_interior(self) -> None:
        box = Rect.from_ltrb(5, -5, 15, 5)
        assert not segment_is_clear(Point(0, 0), Point(20, 0), [box])

    def test_along_edge(self) -> None:
        box = Rect.from_ltrb(5, 0, 15, 5)
        assert segment_is_clear(Point(0, 0), Point(20, 0), [box])

    def test_no_obstacles(self) -> None:
        assert segment_is_clear(Point(0, 0), Point(0, 100), [])


class TestBuildGraph:
    def test_connects_all_aligned_pairs(self) -> None:
        spots = [Point(0, 0), Point(10, 0), Point(20, 0)]
        g = build_graph(spots, [])
        assert g.edge_count == 3
        assert len(g) == 3

    def test_blocked_segments_are_skipped(self) -> None:
        spots = [Point(0, 0), Point(10, 0), Point(20, 0)]
        g = build_graph(spots, [Rect.from_ltrb(5, -5, 15, 5)])
        assert g.edge_count == 0

    def test_boundary_segments_allowed(self) -> None:
        spots = [Point(0, 0), Point(10, 0), Point(20, 0)]
        g = build_graph(spots, [Rect.from_ltrb(5, 0, 15, 5)])
        assert g.edge_count == 3

    def test_diagonal_pairs_never_connected(self) -> None:
        g = build_graph([Point(0, 0), Point(10, 10)], [])
        assert g.edge_count == 0

    def test_all_edges_orthogonal(self) -> None:
        spots = [Point(x, y) for y in (0, 10, 20) for x in (0, 10, 20)]
        g = build_graph(spots, [Rect.from_ltrb(5, 5, 15, 15)])
        assert g.edge_count > 0
        for line in g.edges():
            assert line.is_horizontal or line.is_vertical

    def test_rows_before_columns(self) -> None:
        g = build_graph([Point(0, 0), Point(10, 0), Point(0, 10)], [])
        assert list(g.edges()) == [
            Line(Point(0, 0), Point(10, 0)),
            Line(Point(0, 0), Point(0, 10)),
        ]

    def test_stub_ignores_obstacles(self) -> None:
        spots = [Point(0, 0), Point(10, 0)]
        obstacle = Rect.from_ltrb(-5, -5, 5, 5)
        assert build_graph(spots, [obstacle]).edge_count == 0
        g = build_graph(spots, [obstacle], stubs=[(Point(0, 0), Point(10, 0))])
        assert g.edge_count == 1

    def test_zero_length_stub_skipped(self) -> None:
        g = build_graph([Point(0, 0)], [], stubs=[(Point(0, 0), Point(0, 0))])
        assert g.edge_count == 0
        assert len(g) == 1
