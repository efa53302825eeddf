"""Datascout CLI application entry point.

Provides commands for profiling CSV datasets, listing cleaning
suggestions, applying them, asking questions about the data, and
splitting columns into chart dimensions and measures.

Usage:
    datascout profile <csv-path>
    datascout suggest <csv-path>
    datascout clean <csv-path> [--select N ...]
    datascout ask <csv-path> "<question>"
    datascout columns <csv-path>
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console

from datascout.config import CleaningConfig
from datascout.models.dataset import Dataset

app = typer.Typer(
    name="datascout",
    help="Profile CSV datasets, suggest and apply cleaning fixes, and answer questions.",
    no_args_is_help=True,
)

console = Console()

OutlierMultiplier = Annotated[
    float,
    typer.Option("--outlier-multiplier", help="Flag columns whose max exceeds mean x this"),
]
CapMultiplier = Annotated[
    float,
    typer.Option("--cap-multiplier", help="Cap outliers at median x this"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """Configure logging for the invocation."""
    logger.remove()
    logger.add(
        lambda message: typer.echo(message, err=True, nl=False),
        level="DEBUG" if verbose else "WARNING",
    )


def _load_dataset(csv_path: Path) -> Dataset:
    from datascout.io.csv_reader import read_csv

    try:
        return read_csv(csv_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e


@app.command()
def version() -> None:
    """Show the current version."""
    from datascout import __version__

    console.print(f"datascout {__version__}")


@app.command()
def profile(
    csv_path: Annotated[Path, typer.Argument(help="CSV file to profile")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the profile as JSON to this file"),
    ] = None,
    detail: Annotated[
        bool,
        typer.Option("--detail", "-d", help="Show column-level statistics"),
    ] = False,
) -> None:
    """Profile a CSV dataset.

    Reads the file, infers column types, computes statistics, and
    displays a summary table.
    """
    from datascout.cli.display import display_column_detail, display_profile_summary
    from datascout.io.report import write_profile_report
    from datascout.profiling.profiler import profile_dataset

    dataset = _load_dataset(csv_path)
    result = profile_dataset(dataset)

    console.print()
    display_profile_summary(result, console)
    if detail:
        console.print()
        display_column_detail(result, console)

    if output is not None:
        write_profile_report(result, output)
        console.print(f"\n[green]Profile written to {output}[/green]")


@app.command()
def suggest(
    csv_path: Annotated[Path, typer.Argument(help="CSV file to analyse")],
    outlier_multiplier: OutlierMultiplier = 3.0,
) -> None:
    """List cleaning suggestions for a CSV dataset."""
    from datascout.cleaning.suggestions import generate_suggestions
    from datascout.cli.display import display_suggestions
    from datascout.profiling.profiler import profile_dataset

    dataset = _load_dataset(csv_path)
    config = CleaningConfig(outlier_mean_multiplier=outlier_multiplier)
    suggestions = generate_suggestions(profile_dataset(dataset), config)
    display_suggestions(suggestions, console)


@app.command()
def clean(
    csv_path: Annotated[Path, typer.Argument(help="CSV file to clean")],
    select: Annotated[
        list[int] | None,
        typer.Option(
            "--select",
            "-s",
            help="Suggestion number to apply (repeatable, applied in the given order). "
            "Defaults to every auto-fixable suggestion.",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Cleaned CSV path (default: cleaned_<name>)"),
    ] = None,
    outlier_multiplier: OutlierMultiplier = 3.0,
    cap_multiplier: CapMultiplier = 3.0,
) -> None:
    """Apply cleaning suggestions and write the cleaned CSV."""
    from datascout.cleaning.suggestions import generate_suggestions
    from datascout.cleaning.transformer import DatasetCleaner
    from datascout.cli.display import display_fix_actions, display_suggestions
    from datascout.io.csv_writer import cleaned_filename, write_csv
    from datascout.profiling.profiler import profile_dataset

    dataset = _load_dataset(csv_path)
    config = CleaningConfig(
        outlier_mean_multiplier=outlier_multiplier,
        outlier_cap_multiplier=cap_multiplier,
    )
    result = profile_dataset(dataset)
    suggestions = generate_suggestions(result, config)

    if select:
        invalid = [n for n in select if not 1 <= n <= len(suggestions)]
        if invalid:
            console.print(
                f"[bold red]Error:[/bold red] No suggestion numbered "
                f"{', '.join(str(n) for n in invalid)} ({len(suggestions)} available)."
            )
            raise typer.Exit(code=1)
        chosen = [suggestions[n - 1] for n in select]
    else:
        chosen = [s for s in suggestions if s.auto_fix]

    display_suggestions(chosen, console)
    cleaned, actions = DatasetCleaner(config).apply(dataset, result, chosen)
    display_fix_actions(actions, console)

    out = output if output is not None else csv_path.with_name(cleaned_filename(dataset))
    write_csv(cleaned, out)
    console.print(
        f"\n[green]Cleaned dataset ({cleaned.row_count} rows) written to {out}[/green]"
    )


@app.command()
def ask(
    csv_path: Annotated[Path, typer.Argument(help="CSV file to ask about")],
    question: Annotated[str, typer.Argument(help="Question, e.g. 'How many rows?'")],
) -> None:
    """Answer a question about a CSV dataset."""
    from datascout.cli.display import display_answer
    from datascout.profiling.profiler import profile_dataset
    from datascout.query.engine import answer_question, describe_dataset

    dataset = _load_dataset(csv_path)
    console.print(f"[dim]{describe_dataset(dataset)}[/dim]")
    answer = answer_question(question, dataset, profile_dataset(dataset))
    display_answer(question, answer, console)


@app.command()
def columns(
    csv_path: Annotated[Path, typer.Argument(help="CSV file to categorise")],
    dimension: Annotated[
        str | None,
        typer.Option("--dimension", help="Group by this column"),
    ] = None,
    measure: Annotated[
        str | None,
        typer.Option("--measure", help="Sum this numeric column per group"),
    ] = None,
) -> None:
    """Split columns into dimensions and measures, optionally totalling a measure."""
    from datascout.cli.display import display_categories, display_grouped_totals
    from datascout.profiling.categorize import aggregate_measure, categorize_columns
    from datascout.profiling.profiler import profile_dataset

    dataset = _load_dataset(csv_path)
    categories = categorize_columns(profile_dataset(dataset))
    display_categories(categories, console)

    if dimension is None and measure is None:
        return
    if dimension not in categories.dimensions or measure not in categories.measures:
        console.print(
            "[bold red]Error:[/bold red] --dimension must name a dimension and "
            "--measure must name a measure."
        )
        console.print(f"Dimensions: {', '.join(categories.dimensions) or '-'}")
        console.print(f"Measures: {', '.join(categories.measures) or '-'}")
        raise typer.Exit(code=1)

    console.print()
    display_grouped_totals(aggregate_measure(dataset, dimension, measure), dimension, measure, console)
