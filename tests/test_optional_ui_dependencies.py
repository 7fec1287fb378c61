"""Regression tests for the optional UI dependencies (rich/questionary).

Bootstrap paths must keep working when the UI packages are missing;
the search flow fails cleanly only once a UI path is exercised.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from nix_wrap.cli import exit_codes
from nix_wrap.cli.app import main
from nix_wrap.core.models import Package
from nix_wrap.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def _packages() -> tuple[Package, ...]:
    return (Package(attribute="nixpkgs.hello", name="hello-2.12", description="greeting"),)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    code = main(["--doctor"])
    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)


def test_search_errors_cleanly_when_rich_missing(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setenv("HOME", str(tmp_path))

    with patch("nix_wrap.core.catalog_service.CatalogService") as mock_service_cls:
        mock_service_cls.return_value.all_packages.return_value = _packages()
        with pytest.raises(EnvironmentError, match="rich is not installed"):
            main(["hello"])


def test_search_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    _hide_questionary(monkeypatch)
    monkeypatch.setenv("HOME", str(tmp_path))

    with patch("nix_wrap.core.catalog_service.CatalogService") as mock_service_cls:
        mock_service_cls.return_value.all_packages.return_value = _packages()
        with pytest.raises(EnvironmentError, match="questionary is not installed"):
            main(["hello"])


def test_plain_console_fallback(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    from nix_wrap.cli.console import console, escape_markup, status

    _hide_rich(monkeypatch)
    status("Refreshing cache.")
    console.print("plain", style="bold")

    assert capsys.readouterr().out == "Refreshing cache.\nplain\n"
    assert escape_markup("[x]") == "[x]"
