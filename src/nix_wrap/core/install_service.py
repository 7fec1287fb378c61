"""Core install service — acts on a validated selection.

Delegates to a :class:`~nix_wrap.core.protocols.PackageInstaller`
injected at construction time.
"""

from __future__ import annotations

from collections.abc import Sequence

from nix_wrap.core.models import ResultEntry, Selection, SelectionAction
from nix_wrap.core.protocols import PackageInstaller
from nix_wrap.core.selection import resolve_attributes


class InstallService:
    """Stateless service mapping a selection onto installer calls.

    Parameters
    ----------
    installer:
        Any object satisfying the :class:`PackageInstaller` protocol.
    """

    def __init__(self, installer: PackageInstaller) -> None:
        self._installer: PackageInstaller = installer

    def apply(
        self,
        selection: Selection,
        entries: Sequence[ResultEntry],
    ) -> list[str]:
        """Install (or open a shell with) the selected packages.

        Returns the attribute paths passed to the installer, in the
        order the user typed them.
        """
        attributes = resolve_attributes(selection, entries)
        if selection.action is SelectionAction.SHELL:
            self.shell(attributes)
        else:
            self.install(attributes)
        return attributes

    def install(self, attributes: Sequence[str]) -> None:
        """Install *attributes* with one backend call; no-op when empty."""
        if attributes:
            self._installer.install(list(attributes))

    def shell(self, attributes: Sequence[str]) -> None:
        """Open a shell with *attributes*; no-op when empty."""
        if attributes:
            self._installer.shell(list(attributes))
