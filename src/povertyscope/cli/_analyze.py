"""The ``analyze`` command: run the poverty/crime pipeline on a CSV file."""

from __future__ import annotations

import json
import math
from pathlib import Path

import typer
from rich.markup import escape

from povertyscope.config_loader import resolve_config
from povertyscope.errors import PovertyScopeError
from povertyscope.pipeline import run_pipeline
from povertyscope.report import (
    REJECT_H0,
    conclusion,
    fmt_count,
    fmt_exp,
    fmt_float,
    fmt_pct,
    metrics_to_dict,
    render_markdown_report,
)
from povertyscope.types import MetricsResult

from ._app import app, console
from ._rich_output import bin_table, key_value_panel, result_banner

OUTPUT_FORMATS = ("rich", "json", "markdown")


def _print_rich(result: MetricsResult, alpha: float) -> None:
    sizes = result.sample_sizes
    summary = {
        "Records": fmt_count(sizes.total),
        "Poor / non-poor": f"{fmt_count(sizes.poor)} / {fmt_count(sizes.non_poor)}",
        "Poverty rate": fmt_pct(result.poverty_rate),
        "Overall crime rate": fmt_pct(result.overall_outcome_rate),
        "Crime rate (poor)": fmt_pct(result.poor_outcome_rate),
        "Crime rate (non-poor)": fmt_pct(result.non_poor_outcome_rate),
        "KS statistic": fmt_float(result.ks_statistic),
        "KS p-value": fmt_exp(result.ks_p_value),
    }
    console.print(key_value_panel(summary, title="Poverty & Crime Summary"))

    verdict = conclusion(result.ks_p_value, alpha)
    passed: bool | None
    if verdict == REJECT_H0:
        passed = False
    elif math.isnan(result.ks_p_value):
        passed = None
    else:
        passed = True
    console.print(
        result_banner(
            passed=passed,
            title=verdict,
            lines=[
                f"[ps.muted]Two-sample KS test on crime indicator, alpha={alpha:g}[/ps.muted]"
            ],
        )
    )
    console.print(bin_table(result.bins, title="Crime Rate by Income Bin"))


@app.command(rich_help_panel="Analysis")
def analyze(
    path: Path = typer.Argument(..., help="CSV file with income and committed_crime columns."),
    threshold: float | None = typer.Option(
        None, "--threshold", "-t", help="Poverty threshold; incomes below it are 'poor'."
    ),
    bin_width: float | None = typer.Option(
        None, "--bin-width", "-b", help="Income bin width for the rate series."
    ),
    alpha: float | None = typer.Option(
        None, "--alpha", help="Significance level for the KS verdict."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to povertyscope.toml."
    ),
    format: str = typer.Option("rich", "--format", "-f", help="rich, json, or markdown."),
) -> None:
    """Compare crime rates below and above a poverty threshold.

    [dim]Examples:[/dim]
      povertyscope analyze data.csv --threshold 20000
      povertyscope analyze data.csv -t 20000 -b 10000 --format json
    """
    if format not in OUTPUT_FORMATS:
        console.print(f"[ps.fail]Unknown format:[/ps.fail] {format!r} (use rich, json, or markdown)")
        raise typer.Exit(code=1)

    try:
        settings = resolve_config(config).analysis
    except (FileNotFoundError, PovertyScopeError) as exc:
        console.print(f"[ps.fail]Invalid configuration:[/ps.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    if not path.exists():
        console.print(f"[ps.fail]File not found:[/ps.fail] {escape(str(path))}")
        raise typer.Exit(code=1)

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[ps.fail]Failed to read CSV:[/ps.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    significance = alpha if alpha is not None else settings.significance_level
    try:
        result = run_pipeline(
            text,
            threshold if threshold is not None else settings.threshold,
            bin_width if bin_width is not None else settings.bin_width,
            delimiter=settings.delimiter,
        )
    except PovertyScopeError as exc:
        console.print(f"[ps.fail]Analysis failed:[/ps.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    if format == "json":
        typer.echo(json.dumps(metrics_to_dict(result, alpha=significance), indent=2))
        return
    if format == "markdown":
        typer.echo(render_markdown_report(result, alpha=significance), nl=False)
        return
    _print_rich(result, significance)
