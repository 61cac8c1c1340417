"""Rich display helpers for terminal output."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from prettynumber.core.models import Sample
from prettynumber.formatter import Formatter
from prettynumber.utils.formatting import format_byte_count, format_digits

console = Console()


def setup_logging(level: str = "WARNING") -> None:
    """Route prettynumber logs through a Rich handler."""
    logger = logging.getLogger("prettynumber")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=console, show_path=False))


def print_header():
    """Print the prettynumber header banner."""
    console.print(
        Panel(
            "[bold cyan]prettynumber[/bold cyan]: compact byte counts",
            border_style="cyan",
            padding=(0, 2),
        )
    )
    console.print()


def print_samples(samples: List[Sample], formatter: Optional[Formatter] = None):
    """Print each sample next to its formatted value."""
    formatter = formatter or Formatter()

    table = Table(
        title=f"Samples ({format_digits(formatter.max_significant_digits)})",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Bytes", justify="right", style="white", min_width=16)
    table.add_column("Formatted", justify="right", style="bold cyan", min_width=9)
    table.add_column("Expected", justify="right", style="dim", min_width=8)
    table.add_column("Note", style="dim")

    mismatches = 0
    for sample in samples:
        formatted = formatter.format(sample.number_of_bytes)
        if formatted == sample.expected:
            shown = formatted
        else:
            mismatches += 1
            shown = f"[red]{formatted}[/red]"
        table.add_row(
            format_byte_count(sample.number_of_bytes),
            shown,
            sample.expected,
            sample.note,
        )

    console.print(table)
    if mismatches:
        console.print(f"  [red]{mismatches} sample(s) differ from expected[/red]")
    console.print()


def print_budget_sweep(number_of_bytes: int, budgets: Iterable[int] = range(1, 7)):
    """Print one value formatted at several significant-digit budgets."""
    table = Table(
        title=f"Budget sweep: {format_byte_count(number_of_bytes)}",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Budget", style="white", min_width=10)
    table.add_column("Formatted", justify="right", style="bold cyan", min_width=9)

    for budget in budgets:
        table.add_row(format_digits(budget), Formatter(budget).format(number_of_bytes))

    console.print(table)
    console.print()
