"""Exception hierarchy for Polyclip."""


class PolyclipError(Exception):
    """Base exception for all Polyclip errors."""

    pass


class GeometryError(PolyclipError):
    """Errors in geometric calculations."""

    pass


class UnsupportedDegeneracyError(GeometryError):
    """Two polygon boundaries touch instead of properly crossing.

    Raised when a vertex of one polygon lies on an edge of the other, when
    the polygons share a vertex, or when two edges overlap colinearly. The
    entry/exit alternation cannot be derived for such configurations.
    Perturbing the input slightly is the usual remedy.
    """

    def __init__(
        self,
        subject_edge: int,
        clip_edge: int,
        location: tuple[float, float] | None = None,
    ) -> None:
        self.subject_edge = subject_edge
        self.clip_edge = clip_edge
        self.location = location
        where = f" near {location}" if location is not None else ""
        super().__init__(
            f"Subject edge {subject_edge} touches clip edge {clip_edge}{where}; "
            "boundary-touching polygons are not supported"
        )


class ContourError(GeometryError):
    """Error tracing an output contour through the linked rings."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PolygonIOError(PolyclipError):
    """Errors related to reading or writing polygon files."""

    pass


class PolygonLoadError(PolygonIOError):
    """Error loading a polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load polygons from '{path}': {reason}")


class PolygonFormatError(PolygonIOError):
    """Polygon document is not in a supported shape."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid polygon data in '{path}': {details}")


class PolygonSaveError(PolygonIOError):
    """Error saving polygons to a file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save polygons to '{path}': {reason}")


class ProcessingCancelledError(PolyclipError):
    """Batch processing was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
