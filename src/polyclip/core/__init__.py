"""Core clipping algorithms for polyclip.

This module contains the Greiner-Hormann pipeline:

- Geometry predicates (orientation, segment intersection, winding number)
- Linked rings stored in a node arena
- Phase one: crossing detection and splicing
- Phase two: entry/exit classification
- Phase three: contour extraction
- Orchestration of a single intersection and of batches

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure with respect to their inputs

Key functions:
- intersect: Intersect two coordinate sequences
- segment_intersection: Locate the crossing of two directed segments
- point_in_polygon: Winding-number containment test
- signed_area: Shoelace area

Key classes:
- PolygonClipper: Intersects two domain polygons
- BatchClipper: Intersects many subjects with many cells in parallel
"""

from polyclip.core.batch import BatchClipper, BatchResult, ClipPiece, clip_pair
from polyclip.core.classifier import classify_intersections, tag_entry_exit
from polyclip.core.clipper import PolygonClipper, intersect
from polyclip.core.detector import Crossing, collect_crossings, find_intersections
from polyclip.core.extractor import extract_contours, trace_contour
from polyclip.core.geometry import (
    SegmentCrossing,
    orientation,
    point_in_polygon,
    segment_intersection,
    signed_area,
    winding_number,
)
from polyclip.core.ring import ENTERING, EXITING, Node, NodeArena, Ring

__all__ = [
    "ENTERING",
    "EXITING",
    # Batch
    "BatchClipper",
    "BatchResult",
    "ClipPiece",
    # Detection
    "Crossing",
    # Rings
    "Node",
    "NodeArena",
    # Orchestration
    "PolygonClipper",
    "Ring",
    # Geometry functions
    "SegmentCrossing",
    "classify_intersections",
    "clip_pair",
    "collect_crossings",
    "extract_contours",
    "find_intersections",
    "intersect",
    "orientation",
    "point_in_polygon",
    "segment_intersection",
    "signed_area",
    "tag_entry_exit",
    "trace_contour",
    "winding_number",
]
