"""Command-line interface for fourierpath."""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fourierpath import FourierPathError, __version__
from fourierpath.config import get_config
from fourierpath.geometry.mapping import CoordinateMapping
from fourierpath.geometry.path import CompositePath
from fourierpath.output.writer import CoefficientWriter
from fourierpath.parsing.svg import path_data_from_svg_file, path_from_svg
from fourierpath.preview.terminal import TerminalPreview
from fourierpath.series.fourier import FourierSeries

console = Console()


def _load_path(path_data: str) -> CompositePath:
    """Build a path from SVG path data or from an .svg file."""
    candidate = Path(path_data)
    if candidate.suffix.lower() == ".svg":
        path_data = path_data_from_svg_file(candidate)
    return path_from_svg(path_data)


def _build_series(
    path_data: str,
    series_size: Optional[int],
    samples: Optional[int],
    unit_factor: Optional[float],
    width: Optional[float],
    height: Optional[float],
) -> tuple[CompositePath, CoordinateMapping, FourierSeries]:
    """Apply configuration defaults and compute the coefficients."""
    config = get_config()
    path = _load_path(path_data)
    mapping = CoordinateMapping(
        width or config.surface_width,
        height or config.surface_height,
        unit_factor or config.unit_factor,
    )
    series = FourierSeries(series_size or config.series_size, samples or config.n_samples)
    series.compute_coefficients(path, mapping)
    return path, mapping, series


def series_options(func):
    """Options shared by commands that estimate a series."""
    options = [
        click.option(
            "--series-size",
            "-s",
            type=click.IntRange(min=1),
            default=None,
            help="Harmonics on each side of zero (default: from config or 30)",
        ),
        click.option(
            "--samples",
            "-m",
            type=click.IntRange(min=1),
            default=None,
            help="Number of curve samples (default: from config or 100)",
        ),
        click.option(
            "--unit-factor",
            "-u",
            type=click.FloatRange(min=0, min_open=True),
            default=None,
            help="Abstract units per surface width (default: from config or 5)",
        ),
        click.option(
            "--width",
            type=click.FloatRange(min=0, min_open=True),
            default=None,
            help="Surface width (default: from config or 800)",
        ),
        click.option(
            "--height",
            type=click.FloatRange(min=0, min_open=True),
            default=None,
            help="Surface height (default: from config or 600)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__)
def main():
    """fourierpath - Draw closed curves with epicycles.

    Estimates the Fourier coefficients of a curve and reconstructs it.
    """
    pass


@main.command()
@click.argument("path_data")
@series_options
@click.option(
    "--format",
    "-f",
    type=click.Choice(["json", "text", "markdown"]),
    default=None,
    help="Output format (default: from config or text)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Write coefficients to this file instead of the terminal",
)
@click.option(
    "--limit",
    "-l",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of table rows in terminal preview",
)
def coefficients(
    path_data: str,
    series_size: Optional[int],
    samples: Optional[int],
    unit_factor: Optional[float],
    width: Optional[float],
    height: Optional[float],
    format: Optional[str],
    output: Optional[Path],
    limit: Optional[int],
):
    """Estimate the Fourier coefficients of a curve.

    PATH_DATA: SVG path data (e.g. "M 0 0 L 100 0 Z") or an .svg file
    """
    try:
        path, _, series = _build_series(path_data, series_size, samples, unit_factor, width, height)
        writer = CoefficientWriter()

        output_format = format or get_config().output_format

        if output:
            written = writer.write(series, output, output_format)
            console.print(f"[green]✓[/green] Wrote {len(series.indices)} coefficients to {written}")
        elif output_format in ("json", "markdown"):
            click.echo(writer.render(series, output_format), nl=False)
        else:
            TerminalPreview(console).show(series, path, limit=limit)

    except FourierPathError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@main.command()
@click.argument("path_data")
@series_options
@click.option(
    "--steps",
    "-n",
    type=click.IntRange(min=1),
    default=20,
    help="Number of points over one period (default: 20)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print points as JSON",
)
def trace(
    path_data: str,
    series_size: Optional[int],
    samples: Optional[int],
    unit_factor: Optional[float],
    width: Optional[float],
    height: Optional[float],
    steps: int,
    as_json: bool,
):
    """Reconstruct a curve from its coefficients.

    Prints the reconstructed surface points at t = j / STEPS.

    PATH_DATA: SVG path data or an .svg file
    """
    try:
        _, mapping, series = _build_series(path_data, series_size, samples, unit_factor, width, height)
        points = []
        for j in range(steps):
            t = j / steps
            points.append((t, mapping.to_surface(series.reconstruct(t))))

        if as_json:
            click.echo(json.dumps([{"t": t, "x": p.x, "y": p.y} for t, p in points], indent=2))
            return

        table = Table(title="Reconstruction", show_header=True, header_style="bold cyan")
        table.add_column("t", justify="right")
        table.add_column("x", justify="right")
        table.add_column("y", justify="right")
        for t, p in points:
            table.add_row(f"{t:.4f}", f"{p.x:.3f}", f"{p.y:.3f}")
        console.print(table)

    except FourierPathError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@main.command()
def config_show():
    """Show current configuration."""
    try:
        config = get_config()
        console.print(Panel.fit("[bold cyan]fourierpath Configuration[/bold cyan]", border_style="cyan"))
        console.print()
        console.print(f"[cyan]Series Size:[/cyan] {config.series_size}")
        console.print(f"[cyan]Samples:[/cyan] {config.n_samples}")
        console.print(f"[cyan]Unit Factor:[/cyan] {config.unit_factor}")
        console.print(f"[cyan]History Length:[/cyan] {config.history_length}")
        console.print(f"[cyan]Speed:[/cyan] {config.speed}")
        console.print(f"[cyan]Surface:[/cyan] {config.surface_width} x {config.surface_height}")
        console.print(f"[cyan]Output Format:[/cyan] {config.output_format}")
    except Exception as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
