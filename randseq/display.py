"""
Display utilities for generated sequences.

Provides rich formatting for sequence summaries and the distribution catalog.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from randseq.types import SequenceResult


def summarize(sequence: list[float]) -> dict[str, float]:
    """Return count, mean, std, min and max of a sequence."""
    values = np.asarray(sequence, dtype=float)
    if values.size == 0:
        return {"count": 0}
    return {
        "count": int(values.size),
        "mean": float(values.mean()),
        "std": float(values.std()),
        "min": float(values.min()),
        "max": float(values.max()),
    }


def display_sequence(
    result: SequenceResult,
    console: Console | None = None,
    limit: int = 20,
) -> None:
    """
    Display a generated sequence as a summary table and its first values.

    Args:
        result: The SequenceResult to show.
        console: Optional rich Console instance.
        limit: Maximum number of values to print.
    """
    if console is None:
        console = Console()

    stats = summarize(result.sequence)

    summary = Table(title="Sequence Summary", show_header=True, header_style="bold")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", justify="right")

    summary.add_row("Distribution", result.distribution)
    summary.add_row("Type", result.type)
    for key, value in stats.items():
        summary.add_row(key, str(value) if key == "count" else f"{value:.6g}")

    console.print(summary)

    shown = result.sequence[:limit]
    body = "\n".join(f"{v!r}" for v in shown)
    if len(result.sequence) > limit:
        body += f"\n[dim]... {len(result.sequence) - limit} more[/dim]"
    console.print(Panel(body, title="Values", expand=False))


def display_distributions(
    catalog: list[dict[str, Any]],
    console: Console | None = None,
) -> None:
    """
    Display supported distributions with their parameters and defaults.

    Args:
        catalog: Output of ``SamplerRegistry.describe()``.
        console: Optional rich Console instance.
    """
    if console is None:
        console = Console()

    table = Table(title="Distributions", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("param1")
    table.add_column("param2")
    table.add_column("Source", style="magenta")

    for entry in catalog:
        params = [f"{p['name']} ({p['default']:g})" for p in entry["parameters"]]
        params += ["[dim]-[/dim]"] * (2 - len(params))
        table.add_row(entry["name"], params[0], params[1], entry["source"])

    console.print(table)
