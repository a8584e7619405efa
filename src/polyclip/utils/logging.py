"""Logging utilities for Polyclip."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from a batch clipping run."""

    processed_count: int = 0
    empty_count: int = 0
    error_count: int = 0
    degeneracy_count: int = 0
    pieces_produced: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    pair_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_pair_time_ms(self) -> float | None:
        """Average time spent on one pair, if any were timed."""
        if not self.pair_timings_ms:
            return None
        return sum(self.pair_timings_ms) / len(self.pair_timings_ms)

    @property
    def max_pair_time_ms(self) -> float | None:
        """Slowest pair, if any were timed."""
        if not self.pair_timings_ms:
            return None
        return max(self.pair_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polyclip")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ClipLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_pair_start(self, subject_index: int, cell_index: int) -> None:
        """Log start of a subject/cell intersection."""
        self._logger.debug("Clipping pair", subject=subject_index, cell=cell_index)

    def log_pair_complete(
        self,
        subject_index: int,
        cell_index: int,
        pieces: int,
        duration_ms: float,
    ) -> None:
        """Log a successful intersection."""
        self._logger.info(
            "Pair clipped",
            subject=subject_index,
            cell=cell_index,
            pieces=pieces,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.pieces_produced += pieces
        self._stats.pair_timings_ms.append(duration_ms)

    def log_pair_skipped(self, subject_index: int, cell_index: int, reason: str) -> None:
        """Log a pair whose result was left out."""
        self._logger.debug(
            "Pair skipped", subject=subject_index, cell=cell_index, reason=reason
        )
        self._stats.empty_count += 1

    def log_pair_error(
        self,
        subject_index: int,
        cell_index: int,
        error: str,
        error_type: str,
        traceback: str | None = None,
    ) -> None:
        """Log a failed intersection. The batch carries on, so this is a warning."""
        self._logger.warning(
            "Pair clipping failed",
            subject=subject_index,
            cell=cell_index,
            error=error,
            error_type=error_type,
            traceback=traceback,
        )
        self._stats.error_count += 1
        if error_type == "UnsupportedDegeneracyError":
            self._stats.degeneracy_count += 1
        self._stats.errors.append((f"{subject_index}:{cell_index}", error))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
