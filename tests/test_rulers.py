"""Tests for ruler generation and the routing area."""

from __future__ import annotations

import pytest

from orthogonal_connector.geometry import Point, Rect
from orthogonal_connector.rulers import compute_rulers, routing_area
from orthogonal_connector.validation import RoutingWarning

INFLATED_A = Rect.from_ltrb(-10, -10, 110, 110)
INFLATED_B = Rect.from_ltrb(290, -10, 410, 110)


def _ltrb(r: Rect) -> tuple[int, int, int, int]:
    return (r.left, r.top, r.right, r.bottom)


class TestRoutingArea:
    def test_union_of_margined_shapes(self) -> None:
        area = routing_area(INFLATED_A, INFLATED_B, 0)
        assert _ltrb(area) == (-10, -10, 410, 110)

    def test_global_bounds_margin_grows_area(self) -> None:
        area = routing_area(INFLATED_A, INFLATED_B, 20)
        assert _ltrb(area) == (-30, -30, 430, 130)

    def test_limit_is_the_area(self) -> None:
        limit = Rect.from_ltrb(-100, -100, 600, 600)
        area = routing_area(INFLATED_A, INFLATED_B, 20, limit)
        assert _ltrb(area) == (-100, -100, 600, 600)

    def test_limit_clips_and_warns(self) -> None:
        limit = Rect.from_ltrb(0, -50, 500, 200)
        with pytest.warns(RoutingWarning, match="first shape"):
            area = routing_area(INFLATED_A, INFLATED_B, 0, limit)
        assert _ltrb(area) == (0, -50, 500, 200)


class TestComputeRulers:
    def test_collects_edges_and_points(self) -> None:
        area = Rect.from_ltrb(-10, -10, 410, 110)
        v, h = compute_rulers(
            [INFLATED_A, INFLATED_B], [Point(100, 50), Point(300, 50)], area
        )
        assert v == [-10, 100, 110, 290, 300, 410]
        assert h == [-10, 50, 110]

    def test_sorted_and_unique(self) -> None:
        area = Rect.from_ltrb(0, 0, 100, 100)
        v, h = compute_rulers([Rect.from_ltrb(60, 60, 80, 80)], [Point(20, 70)], area)
        assert v == sorted(set(v))
        assert h == sorted(set(h))

    def test_values_are_plain_ints(self) -> None:
        area = Rect.from_ltrb(-10, -10, 410, 110)
        v, h = compute_rulers([INFLATED_A], [Point(100, 50)], area)
        assert all(type(x) is int for x in v)
        assert all(type(y) is int for y in h)

    def test_values_outside_area_are_dropped(self) -> None:
        area = Rect.from_ltrb(0, -10, 410, 110)
        v, _ = compute_rulers(
            [INFLATED_A, INFLATED_B], [Point(100, 50), Point(300, 50)], area
        )
        assert v == [0, 100, 110, 290, 300, 410]

    def test_global_bounds_edges_become_rulers(self) -> None:
        limit = Rect.from_ltrb(-20, -20, 420, 120)
        area = routing_area(INFLATED_A, INFLATED_B, 0, limit)
        v, h = compute_rulers(
            [INFLATED_A, INFLATED_B], [Point(50, 0), Point(350, 0)], area
        )
        assert v == [-20, -10, 50, 110, 290, 350, 410, 420]
        assert h == [-20, -10, 0, 110, 120]

    def test_area_edges_always_present(self) -> None:
        area = Rect.from_ltrb(-50, -50, 500, 200)
        v, h = compute_rulers([INFLATED_A], [], area)
        assert v[0] == -50 and v[-1] == 500
        assert h[0] == -50 and h[-1] == 200
