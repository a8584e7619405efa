"""Command-line interface for polyclip.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Single intersections with a result table
- Batch clipping with a progress bar
- Verbose/quiet output modes
- Detailed error reporting
"""

from polyclip.cli.app import cli, main

__all__ = ["cli", "main"]
