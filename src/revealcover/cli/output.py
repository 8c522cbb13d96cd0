"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

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
    console.print(f"\n[bold]Revealcover[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_request_info(kind: str, count: int, width: float, height: float, seed: int | None) -> None:
    """Print the covering request.

    Args:
        kind: Covering kind name
        count: Requested shape count
        width: Canvas width
        height: Canvas height
        seed: Random seed, None when unseeded
    """
    seed_str = "random" if seed is None else str(seed)
    console.print(f"  {kind} {SYM_DOT} {count} shapes requested")
    console.print(f"  {width:g} x {height:g} canvas {SYM_DOT} seed {seed_str}")


def print_summary(
    polygons: int,
    covered_area: float,
    canvas_area: float,
    duration_ms: float,
    output_path: str | None = None,
) -> None:
    """Print covering summary.

    Args:
        polygons: Number of polygons generated
        covered_area: Sum of polygon areas
        canvas_area: Area of the canvas
        duration_ms: Generation time in milliseconds
        output_path: File the covering was written to, if any
    """
    coverage = covered_area / canvas_area if canvas_area else 0.0
    coverage_style = "green" if abs(coverage - 1.0) < 1e-9 else "yellow"

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {duration_ms:.1f}ms")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Polygons", str(polygons))
    table.add_row("Covered area", f"{covered_area:,.2f}")
    table.add_row("Coverage", f"[{coverage_style}]{coverage:.6%}[/{coverage_style}]")
    console.print(table)

    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
