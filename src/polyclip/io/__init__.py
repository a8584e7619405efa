"""Polygon I/O layer for polyclip.

This module handles reading and writing polygon documents. It provides a
clean abstraction layer between JSON/GeoJSON files and the domain models.

Key responsibilities:
- Load bare coordinate rings and GeoJSON geometries
- Drop GeoJSON closing points and interior rings
- Write results as JSON rings or GeoJSON features

Key classes:
- PolygonReader: Load polygon files
- PolygonWriter: Save clipping results
- OutputFormat: Output document format
"""

from polyclip.io.reader import PolygonReader
from polyclip.io.writer import OutputFormat, PolygonWriter

__all__ = [
    "OutputFormat",
    "PolygonReader",
    "PolygonWriter",
]
