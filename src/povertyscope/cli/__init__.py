"""povertyscope CLI package."""

from __future__ import annotations

from ._app import app as app
from ._app import config_app as config_app
from ._app import console as console
from ._theme import PALETTE as PALETTE  # noqa: F401
from ._theme import PS_THEME as PS_THEME  # noqa: F401


def _register_commands() -> None:
    """Register command modules in desired help-panel order.

    The import order determines the panel order shown by
    ``povertyscope --help``.
    """
    # isort: off
    from . import _analyze  # noqa: F401  Analysis
    from . import _sample  # noqa: F401  Data

    app.add_typer(config_app, name="config", rich_help_panel="Utilities")
    from . import _config  # noqa: F401
    # isort: on


_register_commands()
