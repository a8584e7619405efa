"""CLI application entry point for polyclip.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from polyclip import __version__
from polyclip.cli.output import (
    console,
    create_progress,
    print_batch_summary,
    print_cancellation_summary,
    print_error,
    print_header,
    print_input_info,
    print_pieces,
    print_processing_info,
    print_step,
    print_success,
)
from polyclip.config import (
    GeometryConfig,
    LoggingConfig,
    PolyclipSettings,
    ProcessingConfig,
)
from polyclip.core import BatchClipper, PolygonClipper
from polyclip.domain import Polygon
from polyclip.exceptions import (
    PolyclipError,
    ProcessingCancelledError,
    UnsupportedDegeneracyError,
)
from polyclip.io import OutputFormat, PolygonReader, PolygonWriter
from polyclip.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="polyclip",
    help="Intersect simple counter-clockwise polygons with the Greiner-Hormann algorithm.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyclip[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Intersect polygons read from JSON or GeoJSON files."""


def _check_input(path: Path) -> None:
    """Exit with an error if an input path is missing or not a file."""
    if not path.exists():
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not path.is_file():
        print_error(
            f"Input path is not a file: {path}",
            details="Please provide a path to a JSON or GeoJSON file.",
        )
        raise typer.Exit(code=1)


def _parse_format(fmt: str) -> OutputFormat:
    """Validate the --format option."""
    try:
        return OutputFormat(fmt.lower())
    except ValueError:
        print_error(
            f"Invalid format: {fmt}",
            details="Valid values: json, geojson",
        )
        raise typer.Exit(code=1)


def _load_polygons(path: Path) -> list[Polygon]:
    """Read every polygon of a file."""
    reader = PolygonReader(path)
    reader.load()
    return reader.polygons()


@app.command()
def intersect(
    subject: Annotated[
        Path,
        typer.Argument(help="File holding the subject polygon", show_default=False),
    ],
    clip: Annotated[
        Path,
        typer.Argument(help="File holding the clip polygon", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the result to this file"),
    ] = None,
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (json|geojson)"),
    ] = "json",
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Treat cross products at or below this magnitude as zero",
            min=0.0,
        ),
    ] = 0.0,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Intersect the first polygon of SUBJECT with the first polygon of CLIP.

    Both polygons must be simple and counter-clockwise, and their boundaries
    must not touch.

    Example:
        polyclip intersect ohio.geojson cell.json -o overlap.json
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    _check_input(subject)
    _check_input(clip)
    output_format = _parse_format(fmt)

    if not quiet:
        print_header(__version__)

    configure_logging(
        log_file=log_file,
        console_level="DEBUG" if verbose else log_level,
        quiet=quiet,
    )

    try:
        if not quiet:
            print_step("Loading polygons")

        subject_reader = PolygonReader(subject)
        subject_reader.load()
        clip_reader = PolygonReader(clip)
        clip_reader.load()

        if not quiet:
            print_input_info(str(subject), subject_reader.polygon_count, "subject")
            print_input_info(str(clip), clip_reader.polygon_count, "clip")
            print_step("Intersecting")

        start_time = time.time()
        clipper = PolygonClipper(GeometryConfig(collinear_tolerance=tolerance))
        pieces = clipper.clip(subject_reader.first(), clip_reader.first())
        elapsed = time.time() - start_time

        if not quiet:
            print_pieces(pieces)

        if output is not None:
            PolygonWriter(output).write(pieces, output_format)

        if not quiet:
            print_success(
                output_path=str(output) if output is not None else None,
                total_time_s=elapsed,
                pieces=len(pieces),
                total_area=sum(p.area for p in pieces),
            )

    except UnsupportedDegeneracyError as e:
        print_error(str(e), details="Perturb the input slightly so the boundaries cross cleanly.")
        raise typer.Exit(code=1)
    except PolyclipError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def batch(
    subjects: Annotated[
        Path,
        typer.Argument(help="File holding the subject polygons", show_default=False),
    ],
    cells: Annotated[
        Path,
        typer.Argument(help="File holding the cell polygons", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {subjects}-clipped.{ext})",
        ),
    ] = None,
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (json|geojson)"),
    ] = "geojson",
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Treat cross products at or below this magnitude as zero",
            min=0.0,
        ),
    ] = 0.0,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Intersect every polygon of SUBJECTS with every polygon of CELLS.

    Pairs whose boundaries touch are counted as errors and skipped; the
    rest of the batch still completes.

    Example:
        polyclip batch states.geojson voronoi.json -j 4
    """
    _check_input(subjects)
    _check_input(cells)
    output_format = _parse_format(fmt)

    if not quiet:
        print_header(__version__)

    settings = PolyclipSettings(
        geometry=GeometryConfig(collinear_tolerance=tolerance),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
            quiet=quiet,
        ),
    )

    if output is None:
        output = PolygonWriter.get_default_path(subjects, output_format)

    try:
        if not quiet:
            print_step("Loading polygons")

        subject_polygons = _load_polygons(subjects)
        cell_polygons = _load_polygons(cells)

        if not quiet:
            print_input_info(str(subjects), len(subject_polygons), "subjects")
            print_input_info(str(cells), len(cell_polygons), "cells")

        pairs = len(subject_polygons) * len(cell_polygons)
        clipper = BatchClipper(settings)

        if not quiet:
            import os

            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Clipping")
            print_processing_info(actual_workers, pairs, is_auto=(workers is None))

            with create_progress() as progress:
                task_id = progress.add_task(f"Clipping {pairs} pairs", total=pairs)

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                result = clipper.process(
                    subjects=subject_polygons,
                    cells=cell_polygons,
                    progress_callback=update_progress,
                )
        else:
            result = clipper.process(subjects=subject_polygons, cells=cell_polygons)

        PolygonWriter(output).write(
            [piece.polygon for piece in result.pieces],
            output_format,
            properties=[
                {"subject": piece.subject_index, "cell": piece.cell_index}
                for piece in result.pieces
            ],
        )

        stats = result.stats
        if not quiet:
            print_batch_summary(
                output_path=str(output),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                pieces=stats.pieces_produced,
                empty=stats.empty_count,
                errors=stats.error_count,
                degeneracies=stats.degeneracy_count,
                avg_time_ms=stats.avg_pair_time_ms,
                max_time_ms=stats.max_pair_time_ms,
            )

    except ProcessingCancelledError as e:
        if not quiet:
            print_cancellation_summary(processed=e.processed_count, cancelled=e.pending_count)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except PolyclipError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
