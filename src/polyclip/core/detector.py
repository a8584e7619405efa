"""Crossing detection between two rings (phase one of the clipping pipeline).

Every subject edge is tested against every clip edge. The edge lists are
snapshotted before anything is inserted, so a freshly spliced crossing is
never tested again. Crossings are collected first and then spliced into
both rings, ordered along each original edge by their parameter.
"""

import logging
from dataclasses import dataclass

from polyclip.core.geometry import interpolate, segment_intersection
from polyclip.core.ring import Ring
from polyclip.domain import Point
from polyclip.exceptions import UnsupportedDegeneracyError

logger = logging.getLogger(__name__)


@dataclass
class Crossing:
    """A proper crossing between a subject edge and a clip edge.

    Attributes:
        subject_edge: Position of the edge in the subject's edge snapshot
        alpha: Parameter of the crossing along the subject edge
        clip_edge: Position of the edge in the clip's edge snapshot
        beta: Parameter of the crossing along the clip edge
        point: Location of the crossing
        subject_node: Arena index of the spliced subject node
        clip_node: Arena index of the spliced clip node
    """

    subject_edge: int
    alpha: float
    clip_edge: int
    beta: float
    point: Point
    subject_node: int = -1
    clip_node: int = -1


def collect_crossings(subject: Ring, clip: Ring, tolerance: float = 0.0) -> list[Crossing]:
    """Find every crossing between the edges of two rings.

    Args:
        subject: Subject ring
        clip: Clip ring (same arena as the subject)
        tolerance: Orientation tolerance passed to the segment test

    Returns:
        Crossings in subject-edge, then clip-edge order

    Raises:
        UnsupportedDegeneracyError: If any pair of edges touches rather than crosses
    """
    arena = subject.arena
    subject_edges = subject.edges()
    clip_edges = clip.edges()
    crossings: list[Crossing] = []

    for s_idx, (s_start, s_end) in enumerate(subject_edges):
        p1 = arena[s_start].point
        p2 = arena[s_end].point
        for c_idx, (c_start, c_end) in enumerate(clip_edges):
            hit = segment_intersection(
                p1, p2, arena[c_start].point, arena[c_end].point, tolerance
            )
            if hit is None:
                continue

            if hit.touching or hit.alpha is None or hit.beta is None:
                location = (
                    interpolate(p1, p2, hit.alpha).to_tuple()
                    if hit.alpha is not None
                    else None
                )
                raise UnsupportedDegeneracyError(s_idx, c_idx, location)

            crossings.append(
                Crossing(
                    subject_edge=s_idx,
                    alpha=hit.alpha,
                    clip_edge=c_idx,
                    beta=hit.beta,
                    point=interpolate(p1, p2, hit.alpha),
                )
            )

    return crossings


def _splice(ring: Ring, crossings: list[Crossing], on_subject: bool) -> None:
    """Insert crossing nodes into a ring, sorted by parameter along each edge."""
    edges = ring.edges()
    by_edge: dict[int, list[Crossing]] = {}
    for crossing in crossings:
        edge = crossing.subject_edge if on_subject else crossing.clip_edge
        by_edge.setdefault(edge, []).append(crossing)

    for edge, group in by_edge.items():
        group.sort(key=lambda c: c.alpha if on_subject else c.beta)
        previous = edges[edge][0]
        for crossing in group:
            previous = ring.insert_after(previous, crossing.point)
            if on_subject:
                crossing.subject_node = previous
            else:
                crossing.clip_node = previous


def find_intersections(subject: Ring, clip: Ring, tolerance: float = 0.0) -> dict[int, None]:
    """Splice all crossings into both rings and link them as neighbors.

    Args:
        subject: Subject ring
        clip: Clip ring (same arena as the subject)
        tolerance: Orientation tolerance passed to the segment test

    Returns:
        Working set of subject-side crossing nodes, as an insertion-ordered
        dict keyed by arena index in subject ring order. Empty when the
        boundaries do not cross.

    Raises:
        UnsupportedDegeneracyError: If any pair of edges touches rather than crosses
    """
    crossings = collect_crossings(subject, clip, tolerance)
    if not crossings:
        return {}

    _splice(subject, crossings, on_subject=True)
    _splice(clip, crossings, on_subject=False)

    arena = subject.arena
    for crossing in crossings:
        arena[crossing.subject_node].neighbor = crossing.clip_node
        arena[crossing.clip_node].neighbor = crossing.subject_node

    logger.debug(
        "Spliced %d crossings (subject %d nodes, clip %d nodes)",
        len(crossings),
        len(subject),
        len(clip),
    )

    return {
        index: None
        for index in subject.iter_indices()
        if arena[index].is_intersection
    }
