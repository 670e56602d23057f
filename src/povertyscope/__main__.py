"""Module entry point for ``python -m povertyscope``."""

from __future__ import annotations

import sys

CLI_REQUIREMENTS = ("typer", "rich")


def main() -> None:
    try:
        from .cli import app
    except ModuleNotFoundError as exc:
        missing = (exc.name or "").split(".")[0].lower()
        if missing not in CLI_REQUIREMENTS:
            raise
        print(
            f"The povertyscope command line needs '{missing}', which is not installed. "
            "Install the package with its dependencies: pip install povertyscope",
            file=sys.stderr,
        )
        raise SystemExit(1) from exc

    app(prog_name="povertyscope")


if __name__ == "__main__":
    main()
