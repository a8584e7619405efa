"""Linked ring representation of polygon boundaries.

A ring is a circular doubly-linked list of nodes, one per vertex. The
clipping phases splice crossing points into rings, tag them, and walk them.
Nodes for both polygons of one clipping call live in a shared NodeArena and
refer to each other by index, so a crossing node can point at its twin on
the other ring without holding a reference to it.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from polyclip.core.geometry import point_in_polygon
from polyclip.domain import Point

ENTERING = 1
EXITING = -1


@dataclass(slots=True)
class Node:
    """A vertex of a ring.

    Attributes:
        point: Location of the vertex
        next: Arena index of the following node on the same ring
        prev: Arena index of the preceding node on the same ring
        is_intersection: True for crossing points spliced in by detection
        entry_exit: ENTERING or EXITING once classified, 0 before that
        neighbor: Arena index of the node at the same crossing on the other ring
    """

    point: Point
    next: int = -1
    prev: int = -1
    is_intersection: bool = False
    entry_exit: int = 0
    neighbor: int | None = None


class NodeArena:
    """Flat storage for the nodes of every ring built during one clipping call."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def allocate(self, point: Point, is_intersection: bool = False) -> int:
        """Store a new unlinked node and return its index."""
        self.nodes.append(Node(point=point, is_intersection=is_intersection))
        return len(self.nodes) - 1


class Ring:
    """A closed polygon boundary stored as a circular doubly-linked list.

    The head is the node built from the polygon's first vertex. Crossing
    nodes are only ever inserted after existing nodes, so the head stays an
    original vertex for the lifetime of the ring.

    Example:
        arena = NodeArena()
        ring = Ring(arena, [Point(0, 0), Point(1, 0), Point(0, 1)])
        for node in ring.iter_nodes():
            print(node.point)
    """

    def __init__(self, arena: NodeArena, points: Sequence[Point]) -> None:
        """Link one node per point, in order, and close the loop.

        Args:
            arena: Arena that owns the nodes
            points: Vertices of a simple counter-clockwise polygon (at least 3)
        """
        self.arena = arena
        indices = [arena.allocate(p) for p in points]
        n = len(indices)
        for i, index in enumerate(indices):
            node = arena[index]
            node.next = indices[(i + 1) % n]
            node.prev = indices[i - 1]
        self.head = indices[0]
        self._size = n

    def __len__(self) -> int:
        return self._size

    def insert_after(self, index: int, point: Point, is_intersection: bool = True) -> int:
        """Splice a new node between ``index`` and its successor.

        Args:
            index: Arena index of a node on this ring
            point: Location of the new node
            is_intersection: Whether the new node marks a crossing

        Returns:
            Arena index of the new node
        """
        new_index = self.arena.allocate(point, is_intersection=is_intersection)
        before = self.arena[index]
        after_index = before.next
        new_node = self.arena[new_index]
        new_node.prev = index
        new_node.next = after_index
        self.arena[after_index].prev = new_index
        before.next = new_index
        self._size += 1
        return new_index

    def iter_indices(self) -> Iterator[int]:
        """Yield arena indices once around the ring, starting at the head."""
        current = self.head
        while True:
            yield current
            current = self.arena[current].next
            if current == self.head:
                return

    def iter_nodes(self) -> Iterator[Node]:
        """Yield nodes once around the ring, starting at the head."""
        for index in self.iter_indices():
            yield self.arena[index]

    def points(self) -> list[Point]:
        """Current vertex locations in ring order."""
        return [node.point for node in self.iter_nodes()]

    def edges(self) -> list[tuple[int, int]]:
        """Snapshot of the ring's edges as (start, end) arena index pairs."""
        return [(index, self.arena[index].next) for index in self.iter_indices()]

    def contains(self, point: Point) -> bool:
        """Winding-number containment test against this ring."""
        return point_in_polygon(point, self.points())
