"""Tests for settings models and logging utilities."""

import logging
from pathlib import Path
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from polyclip.config import (
    GeometryConfig,
    LoggingConfig,
    PolyclipSettings,
    ProcessingConfig,
    get_default_settings,
)
from polyclip.exceptions import (
    ContourError,
    GeometryError,
    PolyclipError,
    PolygonIOError,
    PolygonLoadError,
    ProcessingCancelledError,
    UnsupportedDegeneracyError,
)
from polyclip.utils import ClipLogger, ProcessingStats, configure_logging


@pytest.fixture
def restore_root_logger():
    """Remove handlers added to the root logger during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


class TestSettings:
    """Tests for pydantic settings models."""

    def test_defaults(self):
        settings = get_default_settings()
        assert settings.geometry.collinear_tolerance == 0.0
        assert settings.geometry.area_epsilon == 0.0
        assert settings.processing.max_workers is None
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.quiet is False

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValidationError):
            GeometryConfig(collinear_tolerance=-1.0)

    def test_negative_area_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            GeometryConfig(area_epsilon=-0.5)

    def test_geometry_round_trip_through_dump(self):
        """Worker processes rebuild the config from model_dump()."""
        config = GeometryConfig(collinear_tolerance=1e-9, area_epsilon=0.01)
        assert GeometryConfig(**config.model_dump()) == config

    def test_nested_settings(self, tmp_path: Path):
        settings = PolyclipSettings(
            processing=ProcessingConfig(max_workers=2),
            logging=LoggingConfig(log_file=tmp_path / "run.log"),
        )
        assert settings.processing.max_workers == 2
        assert settings.logging.log_file == tmp_path / "run.log"


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(UnsupportedDegeneracyError, GeometryError)
        assert issubclass(ContourError, GeometryError)
        assert issubclass(GeometryError, PolyclipError)
        assert issubclass(PolygonLoadError, PolygonIOError)
        assert issubclass(ProcessingCancelledError, PolyclipError)

    def test_degeneracy_message(self):
        error = UnsupportedDegeneracyError(2, 5, (1.0, 0.5))
        assert error.subject_edge == 2
        assert error.clip_edge == 5
        assert "near (1.0, 0.5)" in str(error)

    def test_degeneracy_without_location(self):
        assert "near" not in str(UnsupportedDegeneracyError(0, 0))


class TestProcessingStats:
    """Tests for ProcessingStats class."""

    def test_duration(self):
        stats = ProcessingStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == pytest.approx(2.5)

    def test_duration_unfinished(self):
        assert ProcessingStats(start_time=10.0).duration_seconds == 0.0

    def test_timings(self):
        stats = ProcessingStats(pair_timings_ms=[1.0, 3.0, 2.0])
        assert stats.avg_pair_time_ms == pytest.approx(2.0)
        assert stats.max_pair_time_ms == 3.0

    def test_no_timings(self):
        stats = ProcessingStats()
        assert stats.avg_pair_time_ms is None
        assert stats.max_pair_time_ms is None


class TestClipLogger:
    """Tests for ClipLogger class."""

    def test_counts_outcomes(self):
        clip_logger = ClipLogger(Mock())

        clip_logger.log_pair_start(0, 0)
        clip_logger.log_pair_complete(0, 0, pieces=2, duration_ms=1.5)
        clip_logger.log_pair_complete(0, 1, pieces=0, duration_ms=0.5)
        clip_logger.log_pair_skipped(0, 1, "empty intersection")
        clip_logger.log_pair_error(1, 0, "boom", "ContourError")
        clip_logger.log_pair_error(1, 1, "touch", "UnsupportedDegeneracyError")

        stats = clip_logger.stats
        assert stats.processed_count == 2
        assert stats.pieces_produced == 2
        assert stats.empty_count == 1
        assert stats.error_count == 2
        assert stats.degeneracy_count == 1
        assert stats.errors == [("1:0", "boom"), ("1:1", "touch")]
        assert stats.pair_timings_ms == [1.5, 0.5]

    def test_forwards_to_logger(self):
        logger = Mock()
        ClipLogger(logger).log_pair_error(3, 4, "boom", "ContourError")
        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["subject"] == 3
        assert logger.warning.call_args.kwargs["cell"] == 4


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_writes_log_file(self, tmp_path: Path, restore_root_logger):
        log_file = tmp_path / "polyclip.log"

        logger = configure_logging(log_file=log_file, console_level="ERROR")
        logger.info("Pair clipped", subject=1, cell=2)
        for handler in logging.getLogger().handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in text
        assert "Pair clipped" in text

    def test_quiet_console(self, restore_root_logger):
        configure_logging(console_level="DEBUG", quiet=True)
        console_handlers = [
            h
            for h in logging.getLogger().handlers
            if type(h) is logging.StreamHandler
        ]
        assert console_handlers[-1].level == logging.ERROR
