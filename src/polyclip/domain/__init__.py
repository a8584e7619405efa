"""Domain models for polyclip.

This module contains the plain geometric types exchanged between the
clipping kernel, the batch driver, and the I/O layer. They are:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of the kernel's linked-ring representation

Key classes:
- Point: A 2D point
- Polygon: A closed polygon boundary
"""

from polyclip.domain.polygon import Point, Polygon, WindingDirection

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Polygon",
]
