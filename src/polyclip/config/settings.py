"""Configuration settings for Polyclip."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for the clipping kernel.

    The defaults reproduce exact arithmetic: a cross product counts as zero
    only when it is exactly zero.
    """

    collinear_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        description="Cross products with an absolute value at or below this are treated as zero",
    )
    area_epsilon: float = Field(
        default=0.0,
        ge=0.0,
        description="Output contours whose absolute area is at or below this are dropped",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Only show errors on the console",
    )


class PolyclipSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyclipSettings:
    """Get default application settings."""
    return PolyclipSettings()
