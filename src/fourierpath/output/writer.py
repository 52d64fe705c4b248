"""Output writing for coefficient sets in various formats."""

import json
from pathlib import Path
from typing import Literal

from fourierpath.models import CoefficientRecord
from fourierpath.series.fourier import FourierSeries

OutputFormat = Literal["json", "text", "markdown"]


class CoefficientWriter:
    """Write the coefficients of a Fourier series.

    Supports JSON, text, and markdown output formats.
    """

    def records(self, series: FourierSeries) -> list[CoefficientRecord]:
        """Flatten the series coefficients in enumeration order."""
        return [CoefficientRecord.from_complex(index, c) for index, c in series.enumerate()]

    def render(self, series: FourierSeries, format: OutputFormat = "json") -> str:
        """Render coefficients as a string in the specified format.

        Args:
            series: Series with computed coefficients
            format: Output format (json, text, or markdown)

        Returns:
            str: Rendered coefficients
        """
        if format == "json":
            return self.render_json(series)
        elif format == "text":
            return self.render_text(series)
        elif format == "markdown":
            return self.render_markdown(series)
        else:
            raise ValueError(f"Unsupported format: {format}")

    def write(
        self,
        series: FourierSeries,
        output_path: Path | str,
        format: OutputFormat = "json",
    ) -> Path:
        """Write coefficients to file in specified format.

        Args:
            series: Series with computed coefficients
            output_path: Path to output file
            format: Output format (json, text, or markdown)

        Returns:
            Path: Path to written file
        """
        output_path = Path(output_path)
        content = self.render(series, format)

        # Ensure parent directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

        return output_path

    def render_json(self, series: FourierSeries) -> str:
        """Render coefficients as JSON.

        Args:
            series: Series with computed coefficients

        Returns:
            str: JSON document
        """
        document = {
            "series_size": series.series_size,
            "n_samples": series.n_samples,
            "coefficients": [
                {
                    "index": r.index,
                    "real": r.real,
                    "imag": r.imag,
                    "magnitude": r.magnitude,
                    "phase": r.phase,
                }
                for r in self.records(series)
            ],
        }
        return json.dumps(document, indent=2)

    def render_text(self, series: FourierSeries) -> str:
        """Render coefficients as aligned plain text."""
        lines = [
            f"Fourier series: {len(series.indices)} terms from {series.n_samples} samples",
            "",
            f"{'index':>6}  {'real':>14}  {'imag':>14}  {'magnitude':>12}",
        ]
        for r in self.records(series):
            lines.append(f"{r.index:>6}  {r.real:>14.8f}  {r.imag:>14.8f}  {r.magnitude:>12.8f}")
        return "\n".join(lines) + "\n"

    def render_markdown(self, series: FourierSeries) -> str:
        """Render coefficients as a markdown table."""
        lines = [
            "# Fourier Coefficients",
            "",
            f"**Terms:** {len(series.indices)}  ",
            f"**Samples:** {series.n_samples}",
            "",
            "| Index | Real | Imag | Magnitude | Phase |",
            "|------:|-----:|-----:|----------:|------:|",
        ]
        for r in self.records(series):
            lines.append(
                f"| {r.index} | {r.real:.8f} | {r.imag:.8f} | {r.magnitude:.8f} | {r.phase:.6f} |"
            )
        return "\n".join(lines) + "\n"
