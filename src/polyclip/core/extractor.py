"""Contour extraction from tagged rings (phase three of the clipping pipeline).

Each output contour starts at an unvisited subject crossing. From an
entering crossing the walk follows its ring forward, from an exiting one
backward, until it meets the next crossing; there it jumps to the twin node
on the other ring and repeats. The contour closes when a jump lands on the
starting crossing.
"""

import logging

from polyclip.core.geometry import signed_area
from polyclip.core.ring import ENTERING, NodeArena
from polyclip.domain import Point
from polyclip.exceptions import ContourError

logger = logging.getLogger(__name__)


def trace_contour(arena: NodeArena, start: int, working_set: dict[int, None]) -> list[Point]:
    """Walk one closed contour beginning at a crossing node.

    Every crossing passed on the way is removed from the working set.

    Args:
        arena: Arena holding both rings
        start: Arena index of a subject crossing node, already removed from
            the working set
        working_set: Remaining unvisited subject crossings

    Returns:
        Contour vertices in walk order (either winding direction)

    Raises:
        ContourError: If the walk visits more nodes than exist without closing
    """
    limit = len(arena)
    contour: list[Point] = []
    current = start

    while True:
        forward = arena[current].entry_exit == ENTERING
        while True:
            contour.append(arena[current].point)
            if len(contour) > limit:
                raise ContourError(
                    f"Contour starting at node {start} did not close after {limit} steps"
                )
            node = arena[current]
            current = node.next if forward else node.prev
            if arena[current].is_intersection:
                break

        working_set.pop(current, None)
        current = arena[current].neighbor
        if current is None:
            raise ContourError(f"Crossing node reached from node {start} has no neighbor")
        working_set.pop(current, None)

        if current == start:
            return contour


def extract_contours(
    arena: NodeArena,
    working_set: dict[int, None],
    area_epsilon: float = 0.0,
) -> list[list[Point]]:
    """Drain the working set into closed counter-clockwise contours.

    Args:
        arena: Arena holding both tagged rings
        working_set: Subject crossing nodes from detection; emptied in place
        area_epsilon: Contours with an absolute area at or below this are dropped

    Returns:
        Output contours, each with positive signed area
    """
    contours: list[list[Point]] = []

    while working_set:
        start = next(iter(working_set))
        del working_set[start]

        contour = trace_contour(arena, start, working_set)
        area = signed_area(contour)
        if abs(area) <= area_epsilon:
            logger.debug("Dropping sliver contour with %d points", len(contour))
            continue
        if area < 0:
            contour.reverse()
        contours.append(contour)

    return contours
