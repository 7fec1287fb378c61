"""Tests for the install pipeline.

Covers :class:`InstallService` (core) with a mocked installer, and
:class:`NixInstaller` (infra) with a mocked :class:`ProcessRunner`.
Nothing is ever installed.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from nix_wrap.core.install_service import InstallService
from nix_wrap.core.models import Package, ProcessResult, Selection, SelectionAction
from nix_wrap.core.query_filter import index_results
from nix_wrap.exceptions import InstallFailedError, NixWrapIOError
from nix_wrap.infra.nix_installer import NixInstaller, shell_attribute


def _entries() -> list:
    return index_results(
        [
            Package(attribute="nixpkgs.hello", name="hello"),
            Package(attribute="nixpkgs.cowsay", name="cowsay"),
            Package(attribute="nixpkgs.fortune", name="fortune"),
        ],
    )


def _runner(returncode: int = 0) -> MagicMock:
    runner = MagicMock()
    runner.run.return_value = ProcessResult(returncode=returncode)
    return runner


# ---------------------------------------------------------------------------
# InstallService
# ---------------------------------------------------------------------------

class TestInstallService:
    def test_install_single_invocation_in_typed_order(self) -> None:
        installer = MagicMock()
        sel = Selection(SelectionAction.INSTALL, (2, 0, 2))
        attrs = InstallService(installer).apply(sel, _entries())

        assert attrs == ["nixpkgs.fortune", "nixpkgs.hello", "nixpkgs.fortune"]
        installer.install.assert_called_once_with(attrs)
        installer.shell.assert_not_called()

    def test_shell_action(self) -> None:
        installer = MagicMock()
        sel = Selection(SelectionAction.SHELL, (1,))
        InstallService(installer).apply(sel, _entries())
        installer.shell.assert_called_once_with(["nixpkgs.cowsay"])
        installer.install.assert_not_called()

    def test_empty_attributes_do_nothing(self) -> None:
        installer = MagicMock()
        InstallService(installer).install([])
        InstallService(installer).shell([])
        installer.install.assert_not_called()
        installer.shell.assert_not_called()

    def test_installer_errors_propagate(self) -> None:
        installer = MagicMock()
        installer.install.side_effect = InstallFailedError("nix-env", 1)
        with pytest.raises(InstallFailedError):
            InstallService(installer).install(["nixpkgs.hello"])


# ---------------------------------------------------------------------------
# NixInstaller
# ---------------------------------------------------------------------------

class TestShellAttribute:
    def test_strips_nixpkgs_prefix(self) -> None:
        assert shell_attribute("nixpkgs.hello") == "hello"

    def test_other_channels_untouched(self) -> None:
        assert shell_attribute("nixos.hello") == "nixos.hello"


class TestNixInstaller:
    def test_install_command(self) -> None:
        runner = _runner()
        NixInstaller(runner).install(["nixpkgs.hello", "nixpkgs.cowsay"])
        runner.run.assert_called_once_with(
            ["nix-env", "-iA", "nixpkgs.hello", "nixpkgs.cowsay"],
            capture=False,
        )

    def test_shell_command(self) -> None:
        runner = _runner()
        NixInstaller(runner).shell(["nixpkgs.hello", "nixos.git"])
        runner.run.assert_called_once_with(
            ["nix-shell", "-p", "hello", "nixos.git"],
            capture=False,
        )

    def test_non_zero_status_raises(self) -> None:
        with pytest.raises(InstallFailedError) as exc_info:
            NixInstaller(_runner(returncode=100)).install(["nixpkgs.hello"])
        assert exc_info.value.returncode == 100
        assert exc_info.value.command == "nix-env"

    def test_launch_failure_propagates(self) -> None:
        runner = MagicMock()
        runner.run.side_effect = NixWrapIOError("Failed to run nix-env")
        with pytest.raises(NixWrapIOError):
            NixInstaller(runner).install(["nixpkgs.hello"])

    def test_notify_announces_command(self) -> None:
        notices: list[str] = []
        NixInstaller(_runner(), notify=notices.append).install(["nixpkgs.hello"])
        assert notices == ["Running: nix-env -iA nixpkgs.hello"]

    def test_dry_run_does_not_execute(self) -> None:
        runner = _runner()
        notices: list[str] = []
        NixInstaller(runner, dry_run=True, notify=notices.append).install(["nixpkgs.hello"])
        runner.run.assert_not_called()
        assert notices == ["Would run: nix-env -iA nixpkgs.hello"]
