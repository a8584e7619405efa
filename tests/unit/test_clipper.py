"""Unit tests for PolygonClipper and intersect().

Tests cover:
- Crossing boundaries with one and several output pieces
- Containment in either direction
- Disjoint inputs
- Rejection of touching boundaries
- Input immutability and configuration
"""

import pytest

from polyclip import intersect
from polyclip.config import GeometryConfig
from polyclip.core.clipper import PolygonClipper
from polyclip.domain import Polygon, WindingDirection
from polyclip.exceptions import UnsupportedDegeneracyError

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4)]
OFFSET_SQUARE = [(2, 2), (6, 2), (6, 6), (2, 6)]
U_SHAPE = [(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)]
BAR = [(-1, 2), (4, 2), (4, 2.5), (-1, 2.5)]
TRIANGLE_UP = [(0, 0), (6, 0), (3, 6)]
TRIANGLE_DOWN = [(0, 4), (3, -2), (6, 4)]
INNER = [(1, 1), (2, 1), (2, 2), (1, 2)]
SMALL_SQUARE = [(0, 0), (2, 0), (2, 2), (0, 2)]


def _rounded(ring, digits=9):
    return [(round(x, digits) + 0.0, round(y, digits) + 0.0) for x, y in ring]


def _area(ring):
    return Polygon.from_coordinates(ring).signed_area()


class TestIntersect:
    """Tests for the coordinate-level intersect() function."""

    def test_overlapping_squares(self):
        """Two squares overlapping in a corner give that corner square."""
        assert intersect(SQUARE, OFFSET_SQUARE) == [
            [(4.0, 2.0), (4.0, 4.0), (2.0, 4.0), (2.0, 2.0)]
        ]

    def test_overlapping_squares_swapped(self):
        """Swapping roles gives the same region."""
        result = intersect(OFFSET_SQUARE, SQUARE)
        assert len(result) == 1
        assert set(result[0]) == {(4.0, 2.0), (4.0, 4.0), (2.0, 4.0), (2.0, 2.0)}
        assert _area(result[0]) == pytest.approx(4.0)

    def test_concave_subject_gives_two_pieces(self):
        """A bar across both arms of a U gives one piece per arm."""
        result = intersect(U_SHAPE, BAR)

        assert len(result) == 2
        assert _rounded(result[0]) == [(3.0, 2.0), (3.0, 2.5), (2.0, 2.5), (2.0, 2.0)]
        assert _rounded(result[1]) == [(1.0, 2.0), (1.0, 2.5), (0.0, 2.5), (0.0, 2.0)]
        for ring in result:
            assert _area(ring) == pytest.approx(0.5)

    def test_star_of_david(self):
        """Two crossing triangles overlap in a hexagon."""
        result = intersect(TRIANGLE_UP, TRIANGLE_DOWN)

        assert len(result) == 1
        assert set(_rounded(result[0])) == {
            (2.0, 0.0), (4.0, 0.0), (5.0, 2.0), (4.0, 4.0), (2.0, 4.0), (1.0, 2.0),
        }
        assert _area(result[0]) == pytest.approx(12.0)

    def test_clip_inside_subject(self):
        assert intersect(SQUARE, INNER) == [[(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 2.0)]]

    def test_subject_inside_clip(self):
        assert intersect(INNER, SQUARE) == [[(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 2.0)]]

    def test_disjoint(self):
        assert intersect(SQUARE, [(10, 10), (12, 10), (12, 12), (10, 12)]) == []

    def test_unit_square_and_distant_triangle(self):
        assert intersect([[0, 0], [1, 0], [1, 1], [0, 1]], [[2, 2], [3, 2], [2, 3]]) == []

    def test_roles_are_symmetric(self):
        """Swapping subject and clip covers the same area."""
        forward = intersect(U_SHAPE, BAR)
        backward = intersect(BAR, U_SHAPE)
        assert len(backward) == len(forward)
        assert sum(_area(r) for r in backward) == pytest.approx(sum(_area(r) for r in forward))

    def test_deterministic(self):
        assert intersect(TRIANGLE_UP, TRIANGLE_DOWN) == intersect(TRIANGLE_UP, TRIANGLE_DOWN)

    def test_disjoint_with_overlapping_bounds(self):
        """Bounding boxes overlap but the triangles do not."""
        assert intersect([(0, 0), (4, 0), (0, 4)], [(4, 4), (1, 4), (4, 1)]) == []

    @pytest.mark.parametrize(
        "subject,clip",
        [
            pytest.param(SQUARE, OFFSET_SQUARE, id="crossing"),
            pytest.param(SQUARE, INNER, id="contained"),
            pytest.param(U_SHAPE, BAR, id="several-pieces"),
        ],
    )
    def test_coordinate_lists_not_mutated(self, subject, clip):
        """Caller-supplied coordinate lists come back untouched."""
        subject_input = [list(p) for p in subject]
        clip_input = [list(p) for p in clip]

        result = intersect(subject_input, clip_input)

        assert subject_input == [list(p) for p in subject]
        assert clip_input == [list(p) for p in clip]
        assert all(piece is not subject_input and piece is not clip_input for piece in result)

    def test_identity_returns_float_tuples(self):
        result = intersect(SQUARE, INNER)
        assert all(isinstance(c, float) for point in result[0] for c in point)


class TestDegenerateInputs:
    """Touching boundaries raise UnsupportedDegeneracyError."""

    @pytest.mark.parametrize(
        "clip",
        [
            pytest.param([(2, 2), (4, 2), (4, 4), (2, 4)], id="shared-vertex"),
            pytest.param([(2, 1), (4, 0), (4, 3)], id="vertex-on-edge"),
            pytest.param([(1, 0), (3, 0), (3, 1), (1, 1)], id="overlapping-edge"),
        ],
    )
    def test_touching_boundaries(self, clip):
        with pytest.raises(UnsupportedDegeneracyError, match="touches"):
            intersect(SMALL_SQUARE, clip)

    def test_identical_polygons(self):
        """A polygon clipped by itself overlaps along every edge."""
        with pytest.raises(UnsupportedDegeneracyError):
            intersect(SQUARE, SQUARE)


class TestPolygonClipper:
    """Tests for PolygonClipper class."""

    def test_default_config(self):
        clipper = PolygonClipper()
        assert clipper.config.collinear_tolerance == 0.0
        assert clipper.config.area_epsilon == 0.0

    def test_returns_counter_clockwise_polygons(self):
        pieces = PolygonClipper().clip(
            Polygon.from_coordinates(U_SHAPE), Polygon.from_coordinates(BAR)
        )
        assert all(p.direction == WindingDirection.COUNTER_CLOCKWISE for p in pieces)
        assert sum(p.area for p in pieces) == pytest.approx(1.0)

    def test_inputs_not_mutated(self):
        subject = Polygon.from_coordinates(SQUARE)
        clip = Polygon.from_coordinates(OFFSET_SQUARE)
        before = (list(subject.points), list(clip.points))

        PolygonClipper().clip(subject, clip)

        assert (subject.points, clip.points) == before

    def test_contained_result_is_a_copy(self):
        """The returned polygon does not share its point list with the input."""
        inner = Polygon.from_coordinates(INNER)
        result = PolygonClipper().clip(Polygon.from_coordinates(SQUARE), inner)
        assert result == [inner]
        assert result[0].points is not inner.points

    def test_repeatable(self):
        """The clipper holds no state between calls."""
        clipper = PolygonClipper()
        subject = Polygon.from_coordinates(SQUARE)
        clip = Polygon.from_coordinates(OFFSET_SQUARE)
        assert clipper.clip(subject, clip) == clipper.clip(subject, clip)

    def test_area_epsilon_drops_pieces(self):
        clipper = PolygonClipper(GeometryConfig(area_epsilon=1.0))
        pieces = clipper.clip(Polygon.from_coordinates(U_SHAPE), Polygon.from_coordinates(BAR))
        assert pieces == []

    def test_collinear_tolerance_rejects_near_touch(self):
        subject = Polygon.from_coordinates([(0, 0), (4, 0), (0, 4)])
        clip = Polygon.from_coordinates([(2 + 1e-13, 2 + 1e-13), (5, 3), (5, 5)])

        assert PolygonClipper().clip(subject, clip) == []
        with pytest.raises(UnsupportedDegeneracyError):
            PolygonClipper(GeometryConfig(collinear_tolerance=1e-9)).clip(subject, clip)
