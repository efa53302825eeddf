"""Rich display helpers for terminal output.

Provides formatted display functions for dataset profiles, column detail,
cleaning suggestions, applied fixes, and column categorisation using Rich
tables and panels.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from datascout.config import TOP_CATEGORY_LIMIT
from datascout.models.cleaning import CleaningSuggestion, FixAction, IssueKind
from datascout.models.dataset import format_value
from datascout.models.profiling import DatasetProfile
from datascout.profiling.categorize import ColumnCategories


def _missing_style(pct: float) -> str:
    if pct > 50:
        return "bold red"
    if pct > 20:
        return "yellow"
    return "green"


def _fmt_stat(value: float | None) -> str:
    return "-" if value is None else f"{value:.2f}"


def display_profile_summary(profile: DatasetProfile, console: Console) -> None:
    """Print the dataset-level summary of a profile.

    Args:
        profile: DatasetProfile to summarise.
        console: Rich Console for output.
    """
    table = Table(title="Dataset Summary", show_lines=True)
    table.add_column("Dataset", style="bold cyan", no_wrap=True)
    table.add_column("Rows", justify="right", style="green")
    table.add_column("Columns", justify="right")
    table.add_column("Missing", justify="right")
    table.add_column("Missing%", justify="right")
    table.add_column("Duplicates", justify="right")
    table.add_column("Duplicate%", justify="right")

    table.add_row(
        profile.display_name or "-",
        str(profile.row_count),
        str(profile.column_count),
        str(profile.null_values),
        Text(f"{profile.null_percentage:.2f}%", style=_missing_style(profile.null_percentage)),
        str(profile.duplicate_rows),
        f"{profile.duplicate_percentage:.2f}%",
    )
    console.print(table)


def display_column_detail(profile: DatasetProfile, console: Console) -> None:
    """Print per-column statistics for a profile.

    Shows: Column, Type, Unique, Missing%, Min/Max, Mean/Median, Top Values.
    Numeric columns are highlighted in cyan.
    """
    title = f"{profile.display_name or 'Dataset'} ({profile.row_count} rows x {profile.column_count} cols)"
    table = Table(title=title, show_lines=True)
    table.add_column("Column", style="bold", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Unique", justify="right")
    table.add_column("Missing%", justify="right")
    table.add_column("Min / Max", no_wrap=True)
    table.add_column("Mean / Median", no_wrap=True)
    table.add_column("Top Values", max_width=40)

    for c in profile.columns:
        top = c.top_categories(TOP_CATEGORY_LIMIT)
        top_display = ", ".join(f"{tv.value} ({tv.count})" for tv in top[:3])
        if len(top) > 3:
            top_display += ", ..."

        table.add_row(
            c.name,
            Text(str(c.type), style="cyan" if c.is_numeric else ""),
            str(c.unique_count),
            Text(f"{c.null_percentage:.1f}%", style=_missing_style(c.null_percentage)),
            f"{_fmt_stat(c.min)} / {_fmt_stat(c.max)}" if c.is_numeric else "",
            f"{_fmt_stat(c.mean)} / {_fmt_stat(c.median)}" if c.is_numeric else "",
            top_display,
        )

    console.print(table)


_ISSUE_STYLES: dict[IssueKind, str] = {
    IssueKind.MISSING: "yellow",
    IssueKind.DUPLICATE: "magenta",
    IssueKind.OUTLIER: "bold red",
    IssueKind.INCONSISTENT: "blue",
}


def display_suggestions(suggestions: list[CleaningSuggestion], console: Console) -> None:
    """Print numbered cleaning suggestions (numbers are used by ``clean --select``)."""
    if not suggestions:
        console.print("[green]No cleaning suggestions. The dataset looks clean.[/green]")
        return

    table = Table(title=f"Cleaning Suggestions ({len(suggestions)})", show_lines=True)
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Issue", no_wrap=True)
    table.add_column("Column", style="bold", no_wrap=True)
    table.add_column("Description", max_width=50)
    table.add_column("Recommendation", max_width=45)
    table.add_column("Auto", justify="center")

    for idx, s in enumerate(suggestions, 1):
        table.add_row(
            str(idx),
            Text(s.issue.value, style=_ISSUE_STYLES[s.issue]),
            s.column,
            s.description,
            s.recommendation,
            "[green]yes[/green]" if s.auto_fix else "[dim]no[/dim]",
        )

    console.print(table)


def display_fix_actions(actions: list[FixAction], console: Console) -> None:
    """Print the audit trail of applied cleaning fixes."""
    if not actions:
        console.print("[dim]No fixes applied.[/dim]")
        return

    table = Table(title="Applied Fixes", show_lines=True)
    table.add_column("Fix", style="bold", no_wrap=True)
    table.add_column("Column", no_wrap=True)
    table.add_column("Affected", justify="right", style="green")
    table.add_column("Detail", max_width=60)
    for a in actions:
        table.add_row(a.fix_type, a.column, str(a.affected_count), a.detail)
    console.print(table)


def display_categories(categories: ColumnCategories, console: Console) -> None:
    """Print the dimension/measure split."""
    table = Table(title="Column Categories", show_lines=True)
    table.add_column("Dimensions", style="bold")
    table.add_column("Measures", style="cyan")
    depth = max(len(categories.dimensions), len(categories.measures))
    for i in range(depth):
        table.add_row(
            categories.dimensions[i] if i < len(categories.dimensions) else "",
            categories.measures[i] if i < len(categories.measures) else "",
        )
    console.print(table)


def display_grouped_totals(
    totals: list[tuple[str, float]],
    dimension: str,
    measure: str,
    console: Console,
) -> None:
    """Print summed measure values per dimension value."""
    table = Table(title=f"{measure} by {dimension}", show_lines=False)
    table.add_column(dimension, style="bold")
    table.add_column(measure, justify="right", style="green")
    for label, total in totals:
        table.add_row(label, format_value(total))
    console.print(table)


def display_answer(question: str, answer: str, console: Console) -> None:
    """Print a question and its answer."""
    console.print(f"[bold]Q:[/bold] {question}")
    console.print(Panel(answer, title="Answer", border_style="blue", expand=False))
