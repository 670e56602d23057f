"""The ``sample`` command: write a synthetic income/crime dataset."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from povertyscope.config_loader import resolve_config
from povertyscope.errors import PovertyScopeError
from povertyscope.sample import generate_sample_csv

from ._app import app, console


@app.command(rich_help_panel="Data")
def sample(
    output: Path | None = typer.Argument(
        None, help="Destination CSV. Prints to stdout when omitted."
    ),
    rows: int | None = typer.Option(None, "--rows", "-n", min=1, help="Number of rows."),
    seed: int | None = typer.Option(None, "--seed", min=0, help="Random seed."),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to povertyscope.toml."
    ),
) -> None:
    """Generate a deterministic synthetic dataset.

    [dim]Examples:[/dim]
      povertyscope sample sample_poverty_crime.csv
      povertyscope sample --rows 50 --seed 7
    """
    try:
        settings = resolve_config(config).sample
    except (FileNotFoundError, PovertyScopeError) as exc:
        console.print(f"[ps.fail]Invalid configuration:[/ps.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    n_rows = rows if rows is not None else settings.rows
    text = generate_sample_csv(n_rows, seed=seed if seed is not None else settings.seed)

    if output is None:
        typer.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"[ps.pass]Wrote {n_rows} rows[/ps.pass] to {escape(str(output))}")
