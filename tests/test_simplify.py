"""Tests for path simplification."""

from __future__ import annotations

from orthogonal_connector.geometry import BasicCardinalPoint, Line, Point
from orthogonal_connector.simplify import (
    bend_direction,
    is_collinear,
    path_to_lines,
    simplify_path,
)


class TestIsCollinear:
    def test_same_row(self) -> None:
        assert is_collinear(Point(0, 5), Point(3, 5), Point(9, 5))

    def test_same_column(self) -> None:
        assert is_collinear(Point(2, 0), Point(2, 3), Point(2, 9))

    def test_corner(self) -> None:
        assert not is_collinear(Point(0, 0), Point(10, 0), Point(10, 10))


class TestBendDirection:
    def test_turn_south(self) -> None:
        assert bend_direction(Point(0, 0), Point(10, 0), Point(10, 10)) == BasicCardinalPoint.SOUTH

    def test_turn_east(self) -> None:
        assert bend_direction(Point(0, 10), Point(0, 0), Point(10, 0)) == BasicCardinalPoint.EAST

    def test_straight_is_none(self) -> None:
        assert bend_direction(Point(0, 0), Point(10, 0), Point(20, 0)) is None

    def test_diagonal_is_none(self) -> None:
        assert bend_direction(Point(0, 0), Point(5, 5), Point(5, 10)) is None


class TestSimplifyPath:
    def test_merges_collinear_runs(self) -> None:
        pts = [Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 5), Point(10, 10)]
        assert simplify_path(pts) == [Point(0, 0), Point(10, 0), Point(10, 10)]

    def test_removes_duplicates(self) -> None:
        assert simplify_path([Point(0, 0), Point(0, 0), Point(5, 0)]) == [
            Point(0, 0),
            Point(5, 0),
        ]

    def test_short_paths_unchanged(self) -> None:
        assert simplify_path([]) == []
        assert simplify_path([Point(1, 1)]) == [Point(1, 1)]
        assert simplify_path([Point(0, 0), Point(0, 9)]) == [Point(0, 0), Point(0, 9)]

    def test_straight_line_collapses_to_ends(self) -> None:
        pts = [Point(100, 50), Point(110, 50), Point(290, 50), Point(300, 50)]
        assert simplify_path(pts) == [Point(100, 50), Point(300, 50)]

    def test_keeps_every_bend(self) -> None:
        pts = [Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 20), Point(20, 20)]
        assert simplify_path(pts) == pts

    def test_no_collinear_triples_remain(self) -> None:
        pts = [
            Point(0, 0),
            Point(0, 5),
            Point(0, 10),
            Point(4, 10),
            Point(8, 10),
            Point(8, 20),
        ]
        out = simplify_path(pts)
        for i in range(1, len(out) - 1):
            assert not is_collinear(out[i - 1], out[i], out[i + 1])


class TestPathToLines:
    def test_segments(self) -> None:
        pts = [Point(0, 0), Point(10, 0), Point(10, 10)]
        assert path_to_lines(pts) == [
            Line(Point(0, 0), Point(10, 0)),
            Line(Point(10, 0), Point(10, 10)),
        ]

    def test_single_point_has_no_segments(self) -> None:
        assert path_to_lines([Point(0, 0)]) == []
