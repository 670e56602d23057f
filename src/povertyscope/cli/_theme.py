"""Centralized color palette, Rich Theme, and shared constants."""

from __future__ import annotations

from dataclasses import dataclass

from rich.theme import Theme


@dataclass(frozen=True)
class ColorPalette:
    """Immutable color palette for the povertyscope CLI.

    Designed for dark terminal backgrounds.
    """

    # Brand
    primary: str = "#3B82F6"
    # Semantic
    success: str = "#A6E3A1"
    error: str = "#F38BA8"
    info: str = "#89DCEB"
    # Text
    text: str = "#E6EDF3"
    text_muted: str = "#9DA7B4"
    # Borders
    border: str = "#2A313B"


PALETTE = ColorPalette()

# ---------------------------------------------------------------------------
# Rich Theme (semantic named styles)
# ---------------------------------------------------------------------------

PS_THEME = Theme(
    {
        # Structure
        "ps.label": f"bold {PALETTE.text}",
        "ps.muted": f"{PALETTE.text_muted}",
        # Status indicators
        "ps.pass": f"bold {PALETTE.success}",
        "ps.fail": f"bold {PALETTE.error}",
        # Bars
        "ps.bar": f"{PALETTE.primary}",
        # Borders
        "ps.border": f"{PALETTE.border}",
        "ps.border.success": f"{PALETTE.success}",
        "ps.border.error": f"{PALETTE.error}",
        "ps.border.info": f"{PALETTE.info}",
    }
)

# ---------------------------------------------------------------------------
# Shared constants
# ---------------------------------------------------------------------------

STATUS_ICONS: dict[str, str] = {
    "pass": "✓",
    "fail": "✗",
    "info": "•",
}

PANEL_PADDING: tuple[int, int] = (1, 2)
BAR_WIDTH = 30
