"""App definition and root callback for the povertyscope CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from ._theme import PS_THEME

app = typer.Typer(
    help="Compare crime rates of households below and above a poverty threshold.",
    epilog=(
        "[dim]Common workflows:\n"
        "  Try it out        → povertyscope sample data.csv\n"
        "  Analyze a file    → povertyscope analyze data.csv --threshold 20000\n"
        "  Show settings     → povertyscope config show[/dim]"
    ),
    rich_markup_mode="rich",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Inspect povertyscope.toml settings.")

console = Console(theme=PS_THEME)


def _version_callback(value: bool) -> None:
    if value:
        import platform

        import numpy

        from povertyscope import __version__

        console.print(
            f"povertyscope [bold]{__version__}[/bold]  "
            f"(Python {platform.python_version()}, NumPy {numpy.__version__})"
        )
        raise typer.Exit()


def _debug_callback(debug: bool) -> None:
    """Enable debug logging when --debug is passed."""
    if debug:
        import logging

        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """povertyscope command-line interface."""
    _debug_callback(debug)
