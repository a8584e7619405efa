"""Entry/exit classification of crossings (phase two of the clipping pipeline).

Walking a ring from a vertex outside the other polygon, the first crossing
enters it, the next one leaves it, and so on. Starting inside flips the
sequence. Two simple polygons always produce this alternation.
"""

from polyclip.core.ring import ENTERING, EXITING, Ring


def tag_entry_exit(ring: Ring, other: Ring) -> None:
    """Tag every crossing node of ``ring`` as entering or exiting ``other``.

    Args:
        ring: Ring whose crossing nodes are tagged
        other: Ring the crossings enter or leave
    """
    head = ring.arena[ring.head]
    status = EXITING if other.contains(head.point) else ENTERING
    for node in ring.iter_nodes():
        if node.is_intersection:
            node.entry_exit = status
            status = -status


def classify_intersections(subject: Ring, clip: Ring) -> None:
    """Tag crossings on both rings, each against the other ring."""
    tag_entry_exit(subject, clip)
    tag_entry_exit(clip, subject)
