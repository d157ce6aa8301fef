"""Presentation layer for match commands.

This module handles the display of comparison results, template
descriptions and batch summaries, separating presentation logic from
command orchestration.
"""

import pandas as pd
from rich.console import Console
from rich.table import Table
from rich.text import Text

from lines_match.analysis.template_inspector import TemplateLine, TemplateLineKind
from lines_match.matching import MatchResult

_KIND_STYLES = {
    TemplateLineKind.LITERAL: "white",
    TemplateLineKind.PATTERN: "cyan",
    TemplateLineKind.BROKEN_PATTERN: "yellow",
    TemplateLineKind.FAST_FORWARD: "magenta",
    TemplateLineKind.INVALID_DIRECTIVE: "red",
}


def display_result(
    result: MatchResult,
    console: Console,
    expected: list[str] | None = None,
    actual: list[str] | None = None,
) -> None:
    """Display the outcome of a single comparison.

    Args:
        result: Comparison result
        console: Rich console for output
        expected: Expected lines, printed on failure when given
        actual: Actual lines, printed on failure when given
    """
    if result.matched:
        console.print("[bold green]✓[/bold green] Lines match")
        return

    console.print(f"[bold red]✗ Lines do not match[/bold red] ({result.kind.value})")
    console.print(result.message, markup=False, highlight=False, soft_wrap=True)

    if expected is not None and actual is not None:
        _display_lines("Expected", expected, console)
        _display_lines("Actual", actual, console)


def _display_lines(title: str, lines: list[str], console: Console) -> None:
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Line", overflow="fold")

    for number, line in enumerate(lines, start=1):
        table.add_row(str(number), Text(line))

    console.print(table)


def display_template(template: list[TemplateLine], console: Console) -> None:
    """Display how each template line is matched as a Rich table."""
    table = Table(title="Template Lines")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Line", overflow="fold")
    table.add_column("Detail", style="dim", overflow="fold")

    for line in template:
        table.add_row(
            str(line.number),
            Text(line.label, style=_KIND_STYLES[line.kind]),
            Text(line.text),
            Text(line.detail),
        )

    console.print(table)

    kind_counts: dict[str, int] = {}
    for line in template:
        kind_counts[line.kind.value] = kind_counts.get(line.kind.value, 0) + 1
    summary = ", ".join(f"{kind}: {count}" for kind, count in kind_counts.items())
    console.print(f"[dim]Total lines: {len(template)} ({summary})[/dim]", highlight=False)


def display_batch_summary(results: pd.DataFrame, console: Console) -> None:
    """Display batch comparison results as Rich tables.

    Displays two tables:
    1. Overview (total, matched and failed pairs)
    2. Failures (one row per failed pair with kind and message)
    """
    total = len(results)
    matched = int(results["matched"].sum()) if total > 0 else 0
    failed = total - matched

    overview = Table(title="Batch Comparison - Overview")
    overview.add_column("Metric", style="cyan")
    overview.add_column("Value", style="green", justify="right")
    overview.add_row("Total pairs", str(total))
    overview.add_row("Matched", str(matched))
    overview.add_row("Failed", str(failed))
    console.print(overview)

    if failed == 0:
        return

    failures = Table(title="Failures")
    failures.add_column("Expected", style="cyan", overflow="fold")
    failures.add_column("Actual", style="cyan", overflow="fold")
    failures.add_column("Kind", style="red", no_wrap=True)
    failures.add_column("Message", overflow="fold")

    for row in results[~results["matched"]].itertuples(index=False):
        first_line = (row.message.splitlines() or [""])[0]
        failures.add_row(Text(row.expected), Text(row.actual), row.kind, Text(first_line))

    console.print(failures)
