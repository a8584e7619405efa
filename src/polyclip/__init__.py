"""Polyclip - Greiner-Hormann polygon intersection.

Polyclip computes the overlap of two simple, counterclockwise polygons by
splicing their crossing points into linked rings, tagging each crossing as
an entry or exit, and walking the tagged crossings into closed contours.

Example:
    >>> from polyclip import intersect
    >>> intersect([(0, 0), (4, 0), (4, 4), (0, 4)], [(2, 2), (6, 2), (6, 6), (2, 6)])
    [[(4.0, 2.0), (4.0, 4.0), (2.0, 4.0), (2.0, 2.0)]]

The command-line tool wraps the same kernel:
    $ polyclip intersect state.geojson cell.json
"""

from polyclip.core.clipper import PolygonClipper, intersect

__version__ = "0.1.0"

__all__ = ["PolygonClipper", "__version__", "intersect"]
