"""Theme-aware Rich rendering helpers shared across CLI commands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.box import ROUNDED
from rich.panel import Panel
from rich.table import Table

from povertyscope.report import bin_label, fmt_count, fmt_pct
from povertyscope.types import Bin

from ._theme import BAR_WIDTH, PANEL_PADDING, STATUS_ICONS


def key_value_panel(
    data: dict[str, Any],
    *,
    title: str | None = None,
    border: str = "ps.border",
) -> Panel:
    """Render a dict as an aligned key-value panel."""
    max_key_len = max((len(str(k)) for k in data), default=0)
    lines: list[str] = []
    for key, value in data.items():
        padded = str(key).ljust(max_key_len)
        lines.append(f"[ps.label]{padded}[/ps.label]  {value}")
    return Panel(
        "\n".join(lines),
        title=title,
        border_style=border,
        box=ROUNDED,
        padding=PANEL_PADDING,
    )


def result_banner(
    *,
    passed: bool | None,
    title: str,
    lines: Sequence[str] = (),
) -> Panel:
    """Render a verdict banner. ``passed=None`` renders a neutral info banner."""
    if passed is None:
        icon, border = STATUS_ICONS["info"], "ps.border.info"
    elif passed:
        icon, border = STATUS_ICONS["pass"], "ps.border.success"
    else:
        icon, border = STATUS_ICONS["fail"], "ps.border.error"

    return Panel(
        "\n".join(lines),
        title=f"{icon} {title}",
        border_style=border,
        box=ROUNDED,
        padding=PANEL_PADDING,
    )


def _bar(rate: float, max_rate: float) -> str:
    if max_rate <= 0:
        return ""
    filled = round(BAR_WIDTH * rate / max_rate)
    return "█" * filled


def bin_table(bins: Sequence[Bin], *, title: str | None = None) -> Table:
    """Render crime rate per income bin with a proportional text bar."""
    table = Table(title=title)
    table.add_column("Income range", style="ps.label", no_wrap=True)
    table.add_column("Records", justify="right")
    table.add_column("Crime rate", justify="right")
    table.add_column("", style="ps.bar", no_wrap=True)

    max_rate = max((b.rate for b in bins), default=0.0)
    for b in bins:
        table.add_row(bin_label(b), fmt_count(b.count), fmt_pct(b.rate), _bar(b.rate, max_rate))
    return table
