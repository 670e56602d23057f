"""The ``config show`` command."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from povertyscope.config_loader import resolve_config
from povertyscope.errors import PovertyScopeError
from povertyscope.report import fmt_float

from ._app import config_app, console
from ._rich_output import key_value_panel


@config_app.command("show")
def config_show(
    path: Path | None = typer.Argument(None, help="Path to povertyscope.toml."),
    format: str = typer.Option("rich", "--format", "-f", help="rich or json."),
) -> None:
    """Show the resolved configuration (file values over built-in defaults)."""
    try:
        cfg = resolve_config(path)
    except (FileNotFoundError, PovertyScopeError) as exc:
        console.print(f"[ps.fail]Invalid configuration:[/ps.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    analysis = cfg.analysis
    if format == "json":
        payload = {
            "analysis": {
                "threshold": analysis.threshold,
                "bin_width": analysis.bin_width,
                "significance_level": analysis.significance_level,
                "delimiter": analysis.delimiter,
            },
            "sample": {"rows": cfg.sample.rows, "seed": cfg.sample.seed},
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    console.print(
        key_value_panel(
            {
                "Threshold": fmt_float(analysis.threshold, 2),
                "Bin width": fmt_float(analysis.bin_width, 2),
                "Significance level": f"{analysis.significance_level:g}",
                "Delimiter": repr(analysis.delimiter),
                "Sample rows": cfg.sample.rows,
                "Sample seed": cfg.sample.seed,
            },
            title="povertyscope configuration",
        )
    )
