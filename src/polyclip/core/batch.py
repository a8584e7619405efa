"""Parallel clipping of many subject polygons against many cells.

This module intersects every subject polygon (e.g. a region boundary) with
every cell polygon (e.g. the cells of a spatial partition) using
ProcessPoolExecutor. Failures are recorded per pair and never abort the run.

Key components:
- clip_pair: Top-level picklable function for parallel execution
- BatchClipper: Orchestrator class for batch clipping
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from polyclip.config import GeometryConfig, PolyclipSettings
from polyclip.core.clipper import PolygonClipper
from polyclip.domain import Polygon
from polyclip.exceptions import ProcessingCancelledError
from polyclip.utils import ClipLogger, ProcessingStats, configure_logging


def clip_pair(
    subject_dict: dict[str, Any],
    clip_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Intersect one subject polygon with one cell.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        subject_dict: Serialized subject (from Polygon.to_dict())
        clip_dict: Serialized cell (from Polygon.to_dict())
        config_dict: Serialized geometry configuration

    Returns:
        Dictionary containing either:
        - Success: {"polygons": [polygon_dict, ...], "duration_ms": float}
        - Error: {"error": str, "error_type": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        clipper = PolygonClipper(GeometryConfig(**config_dict))
        pieces = clipper.clip(Polygon.from_dict(subject_dict), Polygon.from_dict(clip_dict))

        duration_ms = (time.time() - start_time) * 1000
        return {
            "polygons": [piece.to_dict() for piece in pieces],
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass(frozen=True)
class ClipPiece:
    """One output polygon of a batch, with the pair that produced it."""

    subject_index: int
    cell_index: int
    polygon: Polygon


@dataclass
class BatchResult:
    """Pieces and statistics of a batch run."""

    pieces: list[ClipPiece] = field(default_factory=list)
    stats: ProcessingStats = field(default_factory=ProcessingStats)

    def pieces_for_subject(self, subject_index: int) -> list[ClipPiece]:
        """Pieces cut out of one subject polygon."""
        return [p for p in self.pieces if p.subject_index == subject_index]


class BatchClipper:
    """Orchestrates parallel clipping of subject polygons against cells.

    Manages the complete workflow:
    1. Serialize polygons and configuration for worker processes
    2. Clip every (subject, cell) pair in parallel
    3. Collect results and update statistics
    4. Return pieces in (subject, cell) order

    Example:
        settings = PolyclipSettings()
        batch = BatchClipper(settings)
        result = batch.process(subjects=boundaries, cells=voronoi_cells, max_workers=4)
    """

    def __init__(self, config: PolyclipSettings) -> None:
        """Initialize batch clipper with configuration.

        Args:
            config: Polyclip settings containing geometry, processing and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )

    def process(
        self,
        subjects: list[Polygon],
        cells: list[Polygon],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, bool], None] | None = None,
    ) -> BatchResult:
        """Clip every subject polygon against every cell.

        Args:
            subjects: Subject polygons
            cells: Cell polygons used as clip polygons
            max_workers: Maximum worker processes (None = config value, then auto)
            progress_callback: Optional callback(completed, total, success)
                for progress updates

        Returns:
            BatchResult with pieces sorted by (subject_index, cell_index)

        Raises:
            ProcessingCancelledError: If processing is cancelled by user
        """
        clip_logger = ClipLogger(self.logger)
        stats = clip_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        total = len(subjects) * len(cells)
        self.logger.info(
            "Starting batch clipping",
            subjects=len(subjects),
            cells=len(cells),
            pairs=total,
            max_workers=max_workers,
        )

        pieces: list[ClipPiece] = []
        if total:
            pieces = self._clip_pairs_parallel(
                subjects=subjects,
                cells=cells,
                max_workers=max_workers,
                clip_logger=clip_logger,
                progress_callback=progress_callback,
            )
        else:
            self.logger.info("No pairs to clip")

        pieces.sort(key=lambda p: (p.subject_index, p.cell_index))
        stats.end_time = time.time()

        self.logger.info(
            "Batch complete",
            processed=stats.processed_count,
            empty=stats.empty_count,
            errors=stats.error_count,
            degeneracies=stats.degeneracy_count,
            pieces=stats.pieces_produced,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return BatchResult(pieces=pieces, stats=stats)

    def _clip_pairs_parallel(
        self,
        subjects: list[Polygon],
        cells: list[Polygon],
        max_workers: int | None,
        clip_logger: ClipLogger,
        progress_callback: Callable[[int, int, bool], None] | None = None,
    ) -> list[ClipPiece]:
        """Clip all pairs using ProcessPoolExecutor.

        Args:
            subjects: Subject polygons
            cells: Cell polygons
            max_workers: Maximum worker processes
            clip_logger: Logger that accumulates statistics
            progress_callback: Optional callback(completed, total, success)

        Returns:
            Pieces in completion order
        """
        pieces: list[ClipPiece] = []
        stats = clip_logger.stats

        # Serialize once; every pair reuses these dicts
        config_dict = self.config.geometry.model_dump()
        subject_dicts = [s.to_dict() for s in subjects]
        cell_dicts = [c.to_dict() for c in cells]

        total = len(subject_dicts) * len(cell_dicts)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for s_idx, subject_dict in enumerate(subject_dicts):
                for c_idx, cell_dict in enumerate(cell_dicts):
                    clip_logger.log_pair_start(s_idx, c_idx)
                    future = executor.submit(clip_pair, subject_dict, cell_dict, config_dict)
                    pending_futures[future] = (s_idx, c_idx)

            try:
                for future in as_completed(pending_futures):
                    s_idx, c_idx = pending_futures.pop(future)
                    success = False

                    try:
                        result = future.result()

                        if "error" in result:
                            clip_logger.log_pair_error(
                                subject_index=s_idx,
                                cell_index=c_idx,
                                error=result["error"],
                                error_type=result["error_type"],
                                traceback=result.get("traceback"),
                            )
                        else:
                            success = True
                            polygons = [Polygon.from_dict(p) for p in result["polygons"]]
                            clip_logger.log_pair_complete(
                                subject_index=s_idx,
                                cell_index=c_idx,
                                pieces=len(polygons),
                                duration_ms=result.get("duration_ms", 0.0),
                            )
                            if not polygons:
                                clip_logger.log_pair_skipped(s_idx, c_idx, "empty intersection")
                            for polygon in polygons:
                                pieces.append(ClipPiece(s_idx, c_idx, polygon))

                    except Exception as e:
                        # Executor-level error
                        clip_logger.log_pair_error(
                            subject_index=s_idx,
                            cell_index=c_idx,
                            error=str(e),
                            error_type=type(e).__name__,
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise ProcessingCancelledError(completed, len(pending_futures)) from None

        return pieces
