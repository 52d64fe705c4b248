"""Terminal preview of coefficient sets using Rich."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fourierpath.geometry.path import CompositePath
from fourierpath.models import CoefficientRecord
from fourierpath.series.fourier import FourierSeries


class TerminalPreview:
    """Show a Fourier series in the terminal."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize terminal preview.

        Args:
            console: Rich console to use (creates new if None)
        """
        self.console = console or Console()

    def show(self, series: FourierSeries, path: CompositePath, limit: Optional[int] = None) -> None:
        """Show the summary and the coefficient table.

        Args:
            series: Series with computed coefficients
            path: Path the coefficients were computed from
            limit: Maximum number of rows (default: all)
        """
        closed = "[green]yes[/green]" if path.is_closed() else "[yellow]no[/yellow]"
        self.console.print()
        self.console.print(
            Panel.fit(
                f"[bold cyan]Fourier Series[/bold cyan]\n\n"
                f"Segments: [bold]{len(path)}[/bold]\n"
                f"Closed: {closed}\n"
                f"Terms: [bold]{len(series.indices)}[/bold]\n"
                f"Samples: [bold]{series.n_samples}[/bold]",
                border_style="cyan",
            )
        )
        self.console.print()
        self.console.print(self._build_table(series, limit))

    def _build_table(self, series: FourierSeries, limit: Optional[int]) -> Table:
        table = Table(title="Coefficients", show_header=True, header_style="bold cyan")
        table.add_column("Index", justify="right")
        table.add_column("Real", justify="right")
        table.add_column("Imag", justify="right")
        table.add_column("Magnitude", justify="right", style="green")

        pairs = series.enumerate()
        if limit is not None:
            pairs = pairs[:limit]

        for index, coefficient in pairs:
            r = CoefficientRecord.from_complex(index, coefficient)
            table.add_row(str(r.index), f"{r.real:.6f}", f"{r.imag:.6f}", f"{r.magnitude:.6f}")

        return table
