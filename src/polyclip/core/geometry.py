"""Geometric predicates for the clipping kernel.

This module provides the mathematical building blocks shared by every
clipping phase:
- Orientation (signed-area) test of a point against a directed line
- Directed segment intersection with interpolation parameters
- Winding-number point-in-polygon testing
- Signed area calculation (shoelace formula)

All functions are pure and stateless.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from polyclip.domain import Point


@dataclass(frozen=True, slots=True)
class SegmentCrossing:
    """Where two directed segments meet.

    Attributes:
        alpha: Parameter along the first segment (0 at its start, 1 at its end).
            None when the segments overlap colinearly.
        beta: Parameter along the second segment, same convention as alpha.
        touching: True when the segments meet at an endpoint or overlap
            instead of crossing in both interiors.
    """

    alpha: float | None
    beta: float | None
    touching: bool = False


def orientation(a: Point, b: Point, p: Point) -> float:
    """Twice the signed area of the triangle (a, b, p).

    Positive when p lies left of the directed line a -> b, negative when it
    lies right of it, zero when the three points are colinear.

    Examples:
        >>> orientation(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))
        1.0
        >>> orientation(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, -1.0))
        -1.0
    """
    return (b.x - a.x) * (p.y - a.y) - (p.x - a.x) * (b.y - a.y)


def on_segment(a: Point, p: Point, b: Point) -> bool:
    """Check whether p, known to be colinear with a and b, lies on segment ab."""
    return (
        min(a.x, b.x) <= p.x <= max(a.x, b.x)
        and min(a.y, b.y) <= p.y <= max(a.y, b.y)
    )


def interpolate(a: Point, b: Point, t: float) -> Point:
    """Point at parameter t along a -> b."""
    return Point(a.x * (1 - t) + b.x * t, a.y * (1 - t) + b.y * t)


def segment_intersection(
    p1: Point,
    p2: Point,
    q1: Point,
    q2: Point,
    tolerance: float = 0.0,
) -> SegmentCrossing | None:
    """Determine if and where directed segment p1 -> p2 meets q1 -> q2.

    The segments cross when the endpoints of each lie on opposite sides of
    the other. A zero orientation means a point is colinear with the other
    segment; it counts as contact only if it also lies on that segment, in
    which case the crossing is reported as touching.

    Args:
        p1: Start of the first segment
        p2: End of the first segment
        q1: Start of the second segment
        q2: End of the second segment
        tolerance: Orientation values with an absolute value at or below
            this are treated as zero

    Returns:
        SegmentCrossing if the segments meet, None otherwise

    Examples:
        >>> hit = segment_intersection(
        ...     Point(0.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0), Point(2.0, 0.0)
        ... )
        >>> (hit.alpha, hit.beta, hit.touching)
        (0.5, 0.5, False)
    """
    d_p1 = orientation(q1, q2, p1)
    d_p2 = orientation(q1, q2, p2)
    d_q1 = orientation(p1, p2, q1)
    d_q2 = orientation(p1, p2, q2)

    if tolerance > 0.0:
        d_p1, d_p2, d_q1, d_q2 = (
            0.0 if abs(d) <= tolerance else d for d in (d_p1, d_p2, d_q1, d_q2)
        )

    if d_p1 * d_p2 > 0 or d_q1 * d_q2 > 0:
        return None

    # Colinear segments: overlap iff any endpoint lies on the other segment
    if (d_p1 == 0 and d_p2 == 0) or (d_q1 == 0 and d_q2 == 0):
        if (
            on_segment(q1, p1, q2)
            or on_segment(q1, p2, q2)
            or on_segment(p1, q1, p2)
            or on_segment(p1, q2, p2)
        ):
            return SegmentCrossing(alpha=None, beta=None, touching=True)
        return None

    touching = False
    for value, point, start, end in (
        (d_p1, p1, q1, q2),
        (d_p2, p2, q1, q2),
        (d_q1, q1, p1, p2),
        (d_q2, q2, p1, p2),
    ):
        if value == 0:
            if not on_segment(start, point, end):
                return None
            touching = True

    return SegmentCrossing(
        alpha=d_p1 / (d_p1 - d_p2),
        beta=d_q1 / (d_q1 - d_q2),
        touching=touching,
    )


def winding_number(point: Point, polygon: Sequence[Point]) -> int:
    """Winding number of a closed polygon around a point.

    Counts signed crossings of the polygon boundary over the horizontal line
    through the point: upward edges with the point on their left add one,
    downward edges with the point on their right subtract one.

    Args:
        point: The point to test
        polygon: Vertices of the closed polygon, without a repeated end point

    Returns:
        Signed number of turns the boundary makes around the point
    """
    wn = 0
    n = len(polygon)
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        if a.y <= point.y:
            if b.y > point.y and orientation(a, b, point) > 0:
                wn += 1
        elif b.y <= point.y and orientation(a, b, point) < 0:
            wn -= 1
    return wn


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using the winding number.

    The point is inside when the winding number is odd. Results for points
    exactly on the boundary are unspecified.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    if len(polygon) < 3:
        return False
    return winding_number(point, polygon) % 2 == 1


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Positive area means counter-clockwise winding, negative means clockwise.

    Examples:
        >>> signed_area([Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)])
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0
