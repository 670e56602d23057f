"""Tests for `python -m povertyscope` entrypoint behavior."""

from __future__ import annotations

import builtins
import sys
import types

import pytest

from povertyscope import __main__ as povertyscope_main


def test_main_invokes_cli_app(monkeypatch: pytest.MonkeyPatch) -> None:
    called: dict[str, str] = {}
    dummy_cli = types.ModuleType("povertyscope.cli")

    def _app(*, prog_name: str) -> None:
        called["prog_name"] = prog_name

    dummy_cli.app = _app  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "povertyscope.cli", dummy_cli)

    povertyscope_main.main()
    assert called["prog_name"] == "povertyscope"


def test_main_exits_with_hint_when_cli_dependency_is_missing(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delitem(sys.modules, "povertyscope.cli", raising=False)
    real_import = builtins.__import__

    def _fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name in {"povertyscope.cli", "cli"}:
            err = ModuleNotFoundError("No module named 'typer'")
            err.name = "typer"
            raise err
        return real_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", _fake_import)

    with pytest.raises(SystemExit) as exc:
        povertyscope_main.main()

    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "needs 'typer', which is not installed" in err
    assert "pip install povertyscope" in err


def test_main_reraises_unexpected_module_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delitem(sys.modules, "povertyscope.cli", raising=False)
    real_import = builtins.__import__

    def _fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name in {"povertyscope.cli", "cli"}:
            err = ModuleNotFoundError("No module named 'yaml'")
            err.name = "yaml"
            raise err
        return real_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", _fake_import)

    with pytest.raises(ModuleNotFoundError):
        povertyscope_main.main()
