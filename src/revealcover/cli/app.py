"""CLI application entry point for revealcover.

This module provides the main CLI interface using Typer.
"""

import json
import time
from pathlib import Path
from typing import Annotated

import typer

from revealcover import __version__
from revealcover.cli.output import (
    console,
    print_error,
    print_header,
    print_request_info,
    print_step,
    print_summary,
)
from revealcover.config import (
    CoveringConfig,
    CoveringKind,
    LoggingConfig,
    RevealSettings,
)
from revealcover.core import CoveringService
from revealcover.domain import Canvas
from revealcover.exceptions import InvalidInputError, RevealCoverError
from revealcover.io import CoveringWriter, covering_document
from revealcover.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="revealcover",
    help="Generate polygon coverings that tile a rectangular canvas.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Revealcover[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def cover(
    width: Annotated[
        float,
        typer.Argument(help="Canvas width", show_default=False),
    ],
    height: Annotated[
        float,
        typer.Argument(help="Canvas height", show_default=False),
    ],
    kind: Annotated[
        str,
        typer.Option(
            "--kind",
            "-k",
            help="Covering kind (rectangles|triangles)",
        ),
    ] = "rectangles",
    count: Annotated[
        int,
        typer.Option(
            "--count",
            "-n",
            help="Approximate number of shapes",
            min=0,
        ),
    ] = 10,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            "-s",
            help="Random seed for reproducible coverings",
        ),
    ] = None,
    shuffle: Annotated[
        bool,
        typer.Option(
            "--shuffle/--no-shuffle",
            help="Shuffle polygons into a random reveal order",
        ),
    ] = True,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the covering as JSON to this file",
        ),
    ] = None,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the covering JSON (unless --output is given)",
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
    """Generate a covering of a WIDTH x HEIGHT canvas.

    Example:
        revealcover 800 600 --kind triangles --count 20 -o covering.json
    """
    try:
        covering_kind = CoveringKind.parse(kind)
        canvas = Canvas(width, height)
    except InvalidInputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    settings = RevealSettings(
        covering=CoveringConfig(
            kind=covering_kind,
            object_count=count,
            shuffle=shuffle,
            seed=seed,
        ),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step("Generating covering")
        print_request_info(covering_kind.value, count, canvas.width, canvas.height, seed)

    try:
        service = CoveringService(settings, logger=logger)
        start_time = time.perf_counter()
        polygons = service.cover(canvas.width, canvas.height)
        duration_ms = (time.perf_counter() - start_time) * 1000

        if output is not None:
            CoveringWriter(output).write(polygons, covering_kind, canvas)
        elif quiet:
            typer.echo(json.dumps(covering_document(polygons, covering_kind, canvas)))

    except RevealCoverError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write covering: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        print_summary(
            polygons=len(polygons),
            covered_area=sum(p.area() for p in polygons),
            canvas_area=canvas.area,
            duration_ms=duration_ms,
            output_path=str(output) if output is not None else None,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
