"""Unit tests for geometric predicates.

Tests cover:
- Orientation sign conventions
- Proper, touching, colinear and missing segment intersections
- Winding-number containment
- Shoelace signed area
"""

import pytest

from polyclip.core.geometry import (
    interpolate,
    on_segment,
    orientation,
    point_in_polygon,
    segment_intersection,
    signed_area,
    winding_number,
)
from polyclip.domain import Point

SQUARE = [Point(0.0, 0.0), Point(4.0, 0.0), Point(4.0, 4.0), Point(0.0, 4.0)]


class TestOrientation:
    """Tests for the signed-area orientation test."""

    def test_left_is_positive(self):
        assert orientation(Point(0, 0), Point(2, 0), Point(1, 1)) > 0

    def test_right_is_negative(self):
        assert orientation(Point(0, 0), Point(2, 0), Point(1, -1)) < 0

    def test_colinear_is_zero(self):
        assert orientation(Point(0, 0), Point(2, 2), Point(5, 5)) == 0

    def test_on_segment(self):
        assert on_segment(Point(0, 0), Point(1, 1), Point(2, 2))
        assert not on_segment(Point(0, 0), Point(3, 3), Point(2, 2))

    def test_interpolate(self):
        p = interpolate(Point(0.0, 0.0), Point(4.0, 2.0), 0.25)
        assert p == Point(1.0, 0.5)


class TestSegmentIntersection:
    """Tests for directed segment intersection."""

    def test_proper_crossing(self):
        """Diagonals of a square cross in the middle."""
        hit = segment_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        assert hit is not None
        assert hit.alpha == pytest.approx(0.5)
        assert hit.beta == pytest.approx(0.5)
        assert not hit.touching

    def test_parameters_are_per_segment(self):
        """Alpha and beta measure along their own segments."""
        hit = segment_intersection(Point(0, 0), Point(4, 0), Point(1, -1), Point(1, 3))
        assert hit is not None
        assert hit.alpha == pytest.approx(0.25)
        assert hit.beta == pytest.approx(0.25)

    def test_crossing_point_matches_both_segments(self):
        p1, p2 = Point(0.0, 0.0), Point(3.0, 1.0)
        q1, q2 = Point(1.0, 2.0), Point(2.0, -2.0)
        hit = segment_intersection(p1, p2, q1, q2)
        assert hit is not None
        on_p = interpolate(p1, p2, hit.alpha)
        on_q = interpolate(q1, q2, hit.beta)
        assert on_p.x == pytest.approx(on_q.x)
        assert on_p.y == pytest.approx(on_q.y)

    def test_disjoint_segments(self):
        assert segment_intersection(Point(0, 0), Point(1, 0), Point(2, -1), Point(2, 1)) is None

    def test_parallel_segments(self):
        assert segment_intersection(Point(0, 0), Point(2, 0), Point(0, 1), Point(2, 1)) is None

    def test_colinear_disjoint(self):
        """Segments on one line without overlap do not meet."""
        assert segment_intersection(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)) is None

    def test_colinear_overlap_is_touching(self):
        hit = segment_intersection(Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0))
        assert hit is not None
        assert hit.touching
        assert hit.alpha is None
        assert hit.beta is None

    def test_colinear_containment_is_touching(self):
        """A short segment inside a long one overlaps it."""
        hit = segment_intersection(Point(0, 0), Point(4, 0), Point(1, 0), Point(2, 0))
        assert hit is not None
        assert hit.touching

    def test_endpoint_on_segment_is_touching(self):
        hit = segment_intersection(Point(0, 0), Point(2, 0), Point(1, 0), Point(1, 2))
        assert hit is not None
        assert hit.touching
        assert hit.alpha == pytest.approx(0.5)
        assert hit.beta == pytest.approx(0.0)

    def test_shared_endpoint_is_touching(self):
        hit = segment_intersection(Point(0, 0), Point(2, 0), Point(2, 0), Point(3, 3))
        assert hit is not None
        assert hit.touching

    def test_endpoint_on_line_outside_segment(self):
        """A colinear point beyond the other segment's end is not contact."""
        assert segment_intersection(Point(0, 0), Point(2, 0), Point(3, 0), Point(3, 2)) is None

    def test_tolerance_snaps_near_contact(self):
        """Within tolerance, a near miss counts as touching."""
        p1, p2 = Point(0.0, 0.0), Point(2.0, 2.0)
        q1, q2 = Point(1.0, 1.0 + 1e-12), Point(1.0, 3.0)
        assert segment_intersection(p1, p2, q1, q2) is None
        hit = segment_intersection(p1, p2, q1, q2, tolerance=1e-9)
        assert hit is not None
        assert hit.touching


class TestContainment:
    """Tests for winding-number point-in-polygon."""

    def test_inside(self):
        assert point_in_polygon(Point(1.0, 1.0), SQUARE)

    def test_outside(self):
        assert not point_in_polygon(Point(5.0, 1.0), SQUARE)
        assert not point_in_polygon(Point(-1.0, 2.0), SQUARE)
        assert not point_in_polygon(Point(2.0, 7.0), SQUARE)

    def test_winding_number_sign_follows_orientation(self):
        assert winding_number(Point(2.0, 2.0), SQUARE) == 1
        assert winding_number(Point(2.0, 2.0), list(reversed(SQUARE))) == -1

    def test_clockwise_polygon_still_contains(self):
        """Odd winding numbers count as inside regardless of sign."""
        assert point_in_polygon(Point(2.0, 2.0), list(reversed(SQUARE)))

    def test_concave_notch(self):
        """A point in the notch of a U shape is outside."""
        u_shape = [
            Point(0, 0), Point(3, 0), Point(3, 3), Point(2, 3),
            Point(2, 1), Point(1, 1), Point(1, 3), Point(0, 3),
        ]
        assert not point_in_polygon(Point(1.5, 2.0), u_shape)
        assert point_in_polygon(Point(0.5, 2.0), u_shape)
        assert point_in_polygon(Point(1.5, 0.5), u_shape)

    def test_degenerate_polygon(self):
        assert not point_in_polygon(Point(0.0, 0.0), [Point(0, 0), Point(1, 1)])


class TestSignedArea:
    """Tests for shoelace signed area."""

    def test_ccw_positive(self):
        assert signed_area(SQUARE) == pytest.approx(16.0)

    def test_cw_negative(self):
        assert signed_area(list(reversed(SQUARE))) == pytest.approx(-16.0)

    def test_too_few_points(self):
        assert signed_area([Point(0, 0), Point(1, 0)]) == 0.0
