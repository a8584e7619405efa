"""Core geometric types for polygon representation.

This module defines the fundamental geometric types used throughout polyclip:
- Point: An immutable 2D point
- Polygon: A closed, implicitly-wrapping ring of points
- WindingDirection: Enum for polygon winding direction
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Polygon winding direction.

    Coordinates use the mathematical convention (y grows upwards), so a
    counter-clockwise polygon has positive signed area.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass
class Polygon:
    """A closed polygon boundary.

    The last point connects back to the first; the closing point is never
    repeated. Polygons passed to the clipper are expected to be simple and
    counter-clockwise.

    Attributes:
        points: List of points forming the boundary
    """

    points: list[Point]
    _cached_area: float | None = field(default=None, repr=False, init=False, compare=False)

    @classmethod
    def from_coordinates(cls, coords: Iterable[Sequence[float]]) -> "Polygon":
        """Build a polygon from ``[x, y]`` pairs.

        Args:
            coords: Iterable of two-element coordinate sequences

        Returns:
            Polygon with float coordinates
        """
        return cls(points=[Point(float(c[0]), float(c[1])) for c in coords])

    def to_coordinates(self) -> list[tuple[float, float]]:
        """Return the boundary as a list of ``(x, y)`` tuples."""
        return [p.to_tuple() for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Result is cached for efficiency.

        Returns:
            Signed area of the polygon
        """
        if self._cached_area is not None:
            return self._cached_area

        # Local import: polyclip.core depends on this module
        from polyclip.core.geometry import signed_area

        self._cached_area = signed_area(self.points)
        return self._cached_area

    @property
    def area(self) -> float:
        """Unsigned area of the polygon."""
        return abs(self.signed_area())

    @property
    def direction(self) -> WindingDirection:
        """Winding direction derived from the signed area."""
        if self.signed_area() < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    def reversed(self) -> "Polygon":
        """Return a copy with the opposite winding direction."""
        return Polygon(points=list(reversed(self.points)))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary."""
        return cls(points=[Point.from_dict(p) for p in data["points"]])
