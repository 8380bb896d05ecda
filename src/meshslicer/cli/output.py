"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from meshslicer.core import FragmentOutcome
from meshslicer.domain import Fragment

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Meshslicer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_shape_info(source: str, vertex_count: int, cut_count: int) -> None:
    """Print information about the loaded shape.

    Args:
        source: Shape file path or "default quad"
        vertex_count: Number of vertices in the initial shape
        cut_count: Number of cuts to apply
    """
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {vertex_count} vertices {SYM_DOT} {cut_count} cuts")


def print_cut_result(index: int, cut: str, split: int, failures: Sequence[FragmentOutcome], verbose: bool) -> None:
    """Print the outcome of one cut.

    Args:
        index: 1-based cut number
        cut: Human-readable cut line
        split: Number of fragments split
        failures: Fragments the cut could not split
        verbose: Whether to list individual failures
    """
    style = "green" if split else "yellow"
    console.print(f"  {index}. {cut} {SYM_DOT} [{style}]{split} split[/{style}]")
    if verbose:
        for outcome in failures:
            console.print(f"     {SYM_ERR} fragment {outcome.handle}: {outcome.error}")


def print_fragment_table(fragments: Sequence[Fragment]) -> None:
    """Print a table summarizing fragments.

    Args:
        fragments: Fragments to summarize
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("  #", justify="right")
    table.add_column("Parent", justify="right")
    table.add_column("Vertices", justify="right")
    table.add_column("Triangles", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("UV bounds")

    for fragment in fragments:
        min_u, min_v, max_u, max_v = fragment.uv_bounds()
        table.add_row(
            f"  {fragment.handle}",
            "-" if fragment.parent is None else str(fragment.parent),
            str(fragment.vertex_count),
            str(len(fragment.triangles)),
            f"{fragment.area():.4f}",
            f"u {min_u:.3f}–{max_u:.3f}  v {min_v:.3f}–{max_v:.3f}",
        )

    console.print(table)


def print_success(fragment_count: int, cuts_applied: int, failures: int, output_path: str | None) -> None:
    """Print success message with summary.

    Args:
        fragment_count: Total fragments after slicing
        cuts_applied: Number of cuts kept in the slice history
        failures: Number of fragment-level failures
        output_path: Where meshes were written, if anywhere
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    failure_style = "red" if failures > 0 else "green"
    console.print(
        f"  {fragment_count} fragments {SYM_DOT} {cuts_applied} cuts {SYM_DOT} "
        f"[{failure_style}]{failures} failures[/{failure_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
