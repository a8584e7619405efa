"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from polyclip.domain import Polygon

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for batch clipping.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polyclip[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_input_info(path: str, polygon_count: int, role: str) -> None:
    """Print what was loaded from an input file.

    Args:
        path: Path to the input file
        polygon_count: Number of polygons read
        role: Role of the file ("subject", "clip", "cells")
    """
    # Use Text to safely handle paths with special characters
    line = Text(f"  {role}: ")
    line.append(path)
    plural = "polygon" if polygon_count == 1 else "polygons"
    line.append(f" ({polygon_count} {plural})")
    console.print(line)


def print_pieces(pieces: list[Polygon]) -> None:
    """Print a table of output polygons.

    Args:
        pieces: Polygons produced by the clipper
    """
    if not pieces:
        console.print("  No overlap")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Bounds")

    for i, piece in enumerate(pieces):
        min_x, min_y, max_x, max_y = piece.bounding_box()
        table.add_row(
            str(i),
            str(len(piece)),
            f"{piece.area:.6g}",
            f"({min_x:.6g}, {min_y:.6g}) {SYM_DOT} ({max_x:.6g}, {max_y:.6g})",
        )

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(workers: int, pairs: int, is_auto: bool = False) -> None:
    """Print processing configuration.

    Args:
        workers: Number of parallel workers
        pairs: Number of subject/cell pairs to clip
        is_auto: Whether the worker count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {pairs} pairs {SYM_DOT} {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_success(
    output_path: str | None,
    total_time_s: float,
    pieces: int,
    total_area: float,
) -> None:
    """Print success message for a single intersection.

    Args:
        output_path: Path the result was written to, if any
        total_time_s: Total time in seconds
        pieces: Number of output polygons
        total_area: Sum of output polygon areas
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)
    console.print(f"  {pieces} pieces {SYM_DOT} area {total_area:.6g}")


def print_batch_summary(
    output_path: str | None,
    total_time_s: float,
    processed: int,
    pieces: int,
    empty: int,
    errors: int,
    degeneracies: int,
    avg_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print success message with batch summary.

    Args:
        output_path: Path the result was written to, if any
        total_time_s: Total processing time in seconds
        processed: Number of pairs clipped
        pieces: Number of output polygons
        empty: Number of pairs with no overlap
        errors: Number of pairs that failed
        degeneracies: Number of failures caused by touching boundaries
        avg_time_ms: Average clipping time per pair in milliseconds
        max_time_ms: Slowest pair in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} pairs {SYM_DOT} {pieces} pieces {SYM_DOT} {empty} empty {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )
    if degeneracies:
        console.print(
            f"  {degeneracies} pairs touch at a boundary {SYM_DOT} perturb the input to clip them"
        )

    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.2f}ms avg"
        if max_time_ms is not None:
            timing_str += f" ({max_time_ms:.2f}ms max)"
        console.print(f"  {timing_str}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of pairs clipped before cancellation
        cancelled: Number of pending pairs that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} pairs completed {SYM_DOT} {cancelled} pairs cancelled")
    console.print("  No output file created")
