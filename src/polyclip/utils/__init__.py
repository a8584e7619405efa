"""Utility functions for polyclip.

This module provides utility functions including:

- Logging setup and configuration
- Batch statistics and progress logging
"""

from polyclip.utils.logging import (
    ClipLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ClipLogger",
    "ProcessingStats",
    "configure_logging",
]
