"""CLI application entry point for meshslicer.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from meshslicer import __version__
from meshslicer.cli.output import (
    console,
    print_cut_result,
    print_error,
    print_fragment_table,
    print_header,
    print_shape_info,
    print_step,
    print_success,
)
from meshslicer.config import (
    LoggingConfig,
    MeshSlicerSettings,
    SliceConfig,
    TriangulationConfig,
    TriangulationStrategy,
)
from meshslicer.core import FragmentSlicer
from meshslicer.exceptions import MeshSlicerError, ShapeLoadError, ShapeSaveError
from meshslicer.io import ShapeDocument, default_quad, get_sliced_path, parse_cut, read_shape, write_meshes
from meshslicer.utils import configure_logging

DEFAULT_SHAPE = "default"

# Create the Typer app
app = typer.Typer(
    name="meshslicer",
    help="Slice textured 2D meshes along straight cut lines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Meshslicer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def slice_shape(
    shape: Annotated[
        str,
        typer.Argument(
            help=f"Path to a JSON shape file, or '{DEFAULT_SHAPE}' for the unit quad",
            show_default=False,
        ),
    ],
    cuts: Annotated[
        list[str] | None,
        typer.Option(
            "--cut",
            "-c",
            help="Cut line as x1,y1,x2,y2 (repeatable, applied after the file's cuts)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for fragment meshes (default: {name}-sliced.json)",
        ),
    ] = None,
    strategy: Annotated[
        str,
        typer.Option(
            "--strategy",
            "-s",
            help="Triangulation strategy (delaunay|quad_fan)",
        ),
    ] = "delaunay",
    bounded: Annotated[
        bool,
        typer.Option(
            "--bounded",
            help="Treat cut lines as finite segments (extended once on a miss)",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Slice a shape along one or more cut lines.

    Each cut splits every fragment it crosses into two, keeping texture
    coordinates continuous across the cut.

    Example:
        meshslicer default --cut 0.5,-1,0.5,2 --cut -1,0.5,2,0.5

    This quarters the unit quad into four fragments.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        strategy_choice = TriangulationStrategy(strategy.lower())
    except ValueError:
        print_error(
            f"Invalid strategy: {strategy}",
            details="Valid values: delaunay, quad_fan",
        )
        raise typer.Exit(code=1)

    try:
        extra_cuts = [parse_cut(text) for text in cuts or []]
    except ValueError as e:
        print_error(f"Invalid cut: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = MeshSlicerSettings(
        slicing=SliceConfig(bounded_cut_line=bounded),
        triangulation=TriangulationConfig(strategy=strategy_choice),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        if not quiet:
            print_step("Loading shape")

        if shape == DEFAULT_SHAPE:
            document = ShapeDocument(vertices=default_quad())
            output_path = output
        else:
            shape_path = Path(shape)
            document = read_shape(shape_path)
            output_path = output or get_sliced_path(shape_path)

        all_cuts = document.cuts + extra_cuts

        if not quiet:
            print_shape_info(shape, len(document.vertices), len(all_cuts))

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        slicer = FragmentSlicer(document.vertices, settings, logger=logger)

        if not quiet and all_cuts:
            print_step("Slicing")

        for index, cut in enumerate(all_cuts, start=1):
            report = slicer.add_slice(cut)
            if not quiet:
                print_cut_result(index, str(cut), report.split_count, report.failures, verbose)

        if not quiet:
            print_step("Fragments")
            print_fragment_table(slicer.fragments)

        if output_path is not None:
            write_meshes(output_path, slicer.fragments, slicer.history)

        if not quiet:
            print_success(
                fragment_count=len(slicer.fragments),
                cuts_applied=slicer.stats.cuts_applied,
                failures=slicer.stats.failure_count,
                output_path=str(output_path) if output_path is not None else None,
            )

    except ShapeLoadError as e:
        print_error(f"Could not load shape: {e.reason}")
        raise typer.Exit(code=1)
    except ShapeSaveError as e:
        print_error(f"Could not save meshes: {e.reason}")
        raise typer.Exit(code=1)
    except MeshSlicerError as e:
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
