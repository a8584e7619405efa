"""Greiner-Hormann intersection of two simple polygons.

This module sequences the three clipping phases:
1. Detect crossings and splice them into both rings
2. Tag each crossing as entering or exiting the other polygon
3. Walk tagged crossings into closed output contours

When the boundaries never cross, the result is decided by containment:
one polygon inside the other yields the inner one, otherwise nothing.

Key components:
- PolygonClipper: Clips domain Polygons with a GeometryConfig
- intersect: Clips plain coordinate sequences with default settings
"""

import logging
from collections.abc import Sequence

from polyclip.config import GeometryConfig
from polyclip.core.classifier import classify_intersections
from polyclip.core.detector import find_intersections
from polyclip.core.extractor import extract_contours
from polyclip.core.ring import NodeArena, Ring
from polyclip.domain import Polygon

logger = logging.getLogger(__name__)


class PolygonClipper:
    """Computes the intersection of two polygons.

    Both inputs must be simple, counter-clockwise, have at least three
    points, and must not touch each other's boundary. Orientation and
    simplicity are not checked; touching boundaries raise
    UnsupportedDegeneracyError.

    The clipper holds no state between calls and never mutates its inputs.

    Example:
        clipper = PolygonClipper()
        pieces = clipper.clip(boundary, cell)
        total = sum(piece.area for piece in pieces)
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the clipper.

        Args:
            config: Kernel tolerances (defaults to exact arithmetic)
        """
        self.config = config if config is not None else GeometryConfig()

    def clip(self, subject: Polygon, clip: Polygon) -> list[Polygon]:
        """Intersect two polygons.

        Args:
            subject: Subject polygon
            clip: Clip polygon

        Returns:
            Zero or more disjoint counter-clockwise polygons covering the
            overlap. An empty list means the polygons are disjoint.

        Raises:
            UnsupportedDegeneracyError: If the boundaries touch
            ContourError: If a contour cannot be closed (invalid input)
        """
        arena = NodeArena()
        subject_ring = Ring(arena, subject.points)
        clip_ring = Ring(arena, clip.points)

        working_set = find_intersections(
            subject_ring, clip_ring, tolerance=self.config.collinear_tolerance
        )
        crossings = len(working_set)

        if working_set:
            classify_intersections(subject_ring, clip_ring)
            contours = extract_contours(
                arena, working_set, area_epsilon=self.config.area_epsilon
            )
            result = [Polygon(points=contour) for contour in contours]
            outcome = "crossing"
        elif subject_ring.contains(clip.points[0]):
            result = [Polygon(points=list(clip.points))]
            outcome = "clip_inside"
        elif clip_ring.contains(subject.points[0]):
            result = [Polygon(points=list(subject.points))]
            outcome = "subject_inside"
        else:
            result = []
            outcome = "disjoint"

        logger.debug(
            "Clipped %d-point subject with %d-point clip: %s, %d crossings, %d pieces",
            len(subject),
            len(clip),
            outcome,
            crossings,
            len(result),
        )
        return result


def intersect(
    subject_polygon: Sequence[Sequence[float]],
    clip_polygon: Sequence[Sequence[float]],
) -> list[list[tuple[float, float]]]:
    """Intersect two polygons given as ``[x, y]`` point sequences.

    Args:
        subject_polygon: Subject vertices, implicitly closed, counter-clockwise
        clip_polygon: Clip vertices, implicitly closed, counter-clockwise

    Returns:
        List of output polygons as lists of ``(x, y)`` float tuples. Empty
        when the inputs are disjoint.

    Raises:
        UnsupportedDegeneracyError: If the boundaries touch

    Examples:
        >>> intersect([[0, 0], [1, 0], [1, 1], [0, 1]], [[2, 2], [3, 2], [2, 3]])
        []
    """
    pieces = PolygonClipper().clip(
        Polygon.from_coordinates(subject_polygon),
        Polygon.from_coordinates(clip_polygon),
    )
    return [piece.to_coordinates() for piece in pieces]
