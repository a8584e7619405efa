"""Configuration management for polyclip.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Kernel tolerances
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- PolyclipSettings: Main application settings
"""

from polyclip.config.settings import (
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    PolyclipSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PolyclipSettings",
    "ProcessingConfig",
    "get_default_settings",
]
