"""Polygon writer for saving clipping results.

This module provides the PolygonWriter class for writing polygons as plain
JSON rings or as a GeoJSON FeatureCollection.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from polyclip.domain import Polygon
from polyclip.exceptions import PolygonSaveError
from polyclip.io.converter import polygon_to_ring, polygons_to_feature_collection


class OutputFormat(str, Enum):
    """Supported output document formats."""

    JSON = "json"
    GEOJSON = "geojson"


class PolygonWriter:
    """Writes polygons to JSON or GeoJSON files.

    Example:
        writer = PolygonWriter(Path("result.geojson"))
        writer.write(pieces, OutputFormat.GEOJSON)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the polygon writer.

        Args:
            path: Output file path
        """
        self._path = path

    @property
    def path(self) -> Path:
        """Output file path."""
        return self._path

    def write(
        self,
        polygons: list[Polygon],
        fmt: OutputFormat = OutputFormat.JSON,
        properties: list[dict[str, Any]] | None = None,
    ) -> None:
        """Serialize polygons and write them to the output path.

        Args:
            polygons: Polygons to write
            fmt: Output format
            properties: Per-polygon GeoJSON feature properties (GeoJSON only)

        Raises:
            PolygonSaveError: If the file cannot be written
        """
        if fmt == OutputFormat.GEOJSON:
            document: Any = polygons_to_feature_collection(polygons, properties)
        else:
            document = [polygon_to_ring(p) for p in polygons]

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise PolygonSaveError(str(self._path), str(e)) from e

    @staticmethod
    def get_default_path(subject_path: Path, fmt: OutputFormat = OutputFormat.JSON) -> Path:
        """Generate the default output path next to the subject file.

        Args:
            subject_path: Path of the subject polygon file
            fmt: Output format, which picks the extension

        Returns:
            Path like ``{stem}-clipped.json`` or ``{stem}-clipped.geojson``

        Examples:
            >>> PolygonWriter.get_default_path(Path("/data/ohio.geojson"))
            PosixPath('/data/ohio-clipped.json')
        """
        suffix = ".geojson" if fmt == OutputFormat.GEOJSON else ".json"
        return subject_path.parent / f"{subject_path.stem}-clipped{suffix}"
