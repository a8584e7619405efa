"""Conversion between JSON/GeoJSON documents and domain polygons.

Accepted input shapes:
- A bare ring: ``[[x, y], [x, y], ...]``
- A list of rings: ``[[[x, y], ...], [[x, y], ...]]``
- GeoJSON Polygon, MultiPolygon, GeometryCollection, Feature, FeatureCollection

GeoJSON rings repeat their first position at the end; that closing position
is dropped. Only exterior rings are converted. Holes are outside the
clipper's model and are skipped with a warning.
"""

import logging
import math
from typing import Any

from polyclip.domain import Point, Polygon
from polyclip.exceptions import PolygonFormatError

logger = logging.getLogger(__name__)


def _is_position(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) >= 2
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value[:2])
    )


def ring_to_polygon(coords: Any, source: str) -> Polygon:
    """Convert a coordinate ring into a Polygon.

    Args:
        coords: Sequence of ``[x, y]`` positions, optionally closed
        source: Name of the document, used in error messages

    Returns:
        Polygon without a repeated closing point

    Raises:
        PolygonFormatError: If the ring is not a list of numeric positions
            or has fewer than three distinct positions
    """
    if not isinstance(coords, (list, tuple)):
        raise PolygonFormatError(source, f"expected a list of positions, got {type(coords).__name__}")

    points: list[Point] = []
    for position in coords:
        if not _is_position(position):
            raise PolygonFormatError(source, f"invalid position {position!r}")
        x, y = float(position[0]), float(position[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise PolygonFormatError(source, f"non-finite position {position!r}")
        points.append(Point(x, y))

    if len(points) > 1 and points[0] == points[-1]:
        points.pop()

    if len(points) < 3:
        raise PolygonFormatError(source, f"ring has {len(points)} points, need at least 3")

    return Polygon(points=points)


def _polygon_rings(rings: Any, source: str) -> list[Polygon]:
    """Convert GeoJSON Polygon coordinates, keeping the exterior ring."""
    if not isinstance(rings, list) or not rings:
        raise PolygonFormatError(source, "Polygon needs at least one ring")
    if len(rings) > 1:
        logger.warning(
            "Skipping %d interior ring(s) in %s; holes are not supported",
            len(rings) - 1,
            source,
        )
    return [ring_to_polygon(rings[0], source)]


def geometry_to_polygons(geometry: Any, source: str) -> list[Polygon]:
    """Convert a GeoJSON geometry, feature or collection into polygons.

    Args:
        geometry: Parsed GeoJSON object
        source: Name of the document, used in error messages

    Returns:
        Exterior rings of every polygon in the object, in document order

    Raises:
        PolygonFormatError: If the object type is not supported
    """
    if not isinstance(geometry, dict):
        raise PolygonFormatError(source, "expected a GeoJSON object")

    kind = geometry.get("type")
    if kind == "Polygon":
        return _polygon_rings(geometry.get("coordinates"), source)
    elif kind == "MultiPolygon":
        coordinates = geometry.get("coordinates")
        if not isinstance(coordinates, list):
            raise PolygonFormatError(source, "MultiPolygon coordinates must be a list")
        return [p for rings in coordinates for p in _polygon_rings(rings, source)]
    elif kind == "GeometryCollection":
        geometries = geometry.get("geometries", [])
        if not isinstance(geometries, list):
            raise PolygonFormatError(source, "GeometryCollection geometries must be a list")
        return [p for g in geometries for p in geometry_to_polygons(g, source)]
    elif kind == "Feature":
        if geometry.get("geometry") is None:
            return []
        return geometry_to_polygons(geometry["geometry"], source)
    elif kind == "FeatureCollection":
        features = geometry.get("features", [])
        if not isinstance(features, list):
            raise PolygonFormatError(source, "FeatureCollection features must be a list")
        return [p for f in features for p in geometry_to_polygons(f, source)]
    else:
        raise PolygonFormatError(source, f"unsupported geometry type {kind!r}")


def document_to_polygons(data: Any, source: str) -> list[Polygon]:
    """Convert a parsed JSON document into polygons.

    Args:
        data: Parsed JSON value
        source: Name of the document, used in error messages

    Returns:
        Polygons in document order

    Raises:
        PolygonFormatError: If the document has an unsupported shape
    """
    if isinstance(data, dict):
        return geometry_to_polygons(data, source)

    if isinstance(data, list) and data:
        if _is_position(data[0]):
            return [ring_to_polygon(data, source)]
        return [ring_to_polygon(ring, source) for ring in data]

    raise PolygonFormatError(source, "expected a ring, a list of rings, or a GeoJSON object")


def polygon_to_ring(polygon: Polygon, closed: bool = False) -> list[list[float]]:
    """Convert a Polygon into a list of ``[x, y]`` positions.

    Args:
        polygon: Polygon to convert
        closed: Repeat the first position at the end (GeoJSON convention)

    Returns:
        Coordinate ring
    """
    ring = [[p.x, p.y] for p in polygon.points]
    if closed and ring:
        ring.append(list(ring[0]))
    return ring


def polygons_to_feature_collection(
    polygons: list[Polygon],
    properties: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Wrap polygons as a GeoJSON FeatureCollection of Polygon features.

    Args:
        polygons: Polygons to export
        properties: Optional per-polygon feature properties

    Returns:
        GeoJSON FeatureCollection dictionary
    """
    features = []
    for i, polygon in enumerate(polygons):
        features.append(
            {
                "type": "Feature",
                "properties": dict(properties[i]) if properties else {},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [polygon_to_ring(polygon, closed=True)],
                },
            }
        )
    return {"type": "FeatureCollection", "features": features}
