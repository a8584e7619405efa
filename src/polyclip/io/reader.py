"""Polygon reader for loading JSON and GeoJSON files.

This module provides the PolygonReader class for loading polygon documents
and converting them into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path

from polyclip.domain import Polygon
from polyclip.exceptions import PolygonFormatError, PolygonLoadError
from polyclip.io.converter import document_to_polygons


class PolygonReader:
    """Loads polygon documents and extracts domain polygons.

    Example:
        reader = PolygonReader(Path("cells.geojson"))
        reader.load()
        for polygon in reader.iter_polygons():
            print(polygon.area)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the polygon reader.

        Args:
            path: Path to a JSON or GeoJSON file
        """
        self._path = path
        self._polygons: list[Polygon] | None = None

    def load(self) -> None:
        """Read and parse the file.

        Raises:
            PolygonLoadError: If the file does not exist or cannot be read
            PolygonFormatError: If the file is not valid JSON or holds no
                supported polygon data
        """
        if not self._path.exists():
            raise PolygonLoadError(str(self._path), "file not found")

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise PolygonLoadError(str(self._path), str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PolygonFormatError(str(self._path), f"invalid JSON: {e}") from e

        self._polygons = document_to_polygons(data, str(self._path))

    @property
    def polygon_count(self) -> int:
        """Number of polygons in the document.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return len(self.polygons())

    def polygons(self) -> list[Polygon]:
        """Return all polygons in document order.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._polygons is None:
            raise RuntimeError("Polygons not loaded. Call load() first.")
        return list(self._polygons)

    def iter_polygons(self) -> Iterator[Polygon]:
        """Iterate over polygons in document order."""
        yield from self.polygons()

    def first(self) -> Polygon:
        """Return the first polygon of the document.

        Raises:
            PolygonFormatError: If the document contains no polygons
        """
        polygons = self.polygons()
        if not polygons:
            raise PolygonFormatError(str(self._path), "document contains no polygons")
        return polygons[0]
