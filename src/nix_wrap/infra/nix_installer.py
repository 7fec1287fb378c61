"""``nix-env`` / ``nix-shell`` backed implementation of :class:`~nix_wrap.core.protocols.PackageInstaller`.

The child processes inherit the terminal so the user sees Nix's own
build output.  A non-zero exit status is reported as
:class:`~nix_wrap.exceptions.InstallFailedError`.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Sequence

from nix_wrap.core.protocols import ProcessRunner
from nix_wrap.exceptions import InstallFailedError
from nix_wrap.utils.constants import INSTALL_COMMAND, NIXPKGS_PREFIX, SHELL_COMMAND

logger = logging.getLogger(__name__)


def shell_attribute(attribute: str) -> str:
    """Strip the channel prefix ``nix-shell -p`` does not understand."""
    if attribute.startswith(NIXPKGS_PREFIX):
        return attribute[len(NIXPKGS_PREFIX):]
    return attribute


class NixInstaller:
    """Concrete :class:`PackageInstaller`.

    Parameters
    ----------
    runner:
        Process runner used to launch Nix.
    dry_run:
        When ``True``, report the command through *notify* instead of
        running it.
    notify:
        Optional callable receiving one-line status notices.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        *,
        dry_run: bool = False,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._runner: ProcessRunner = runner
        self._dry_run: bool = dry_run
        self._notify: Callable[[str], None] | None = notify

    @staticmethod
    def install_command(attributes: Sequence[str]) -> list[str]:
        return [*INSTALL_COMMAND, *attributes]

    @staticmethod
    def shell_command(attributes: Sequence[str]) -> list[str]:
        return [*SHELL_COMMAND, *(shell_attribute(a) for a in attributes)]

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def install(self, attributes: Sequence[str]) -> None:
        """Run ``nix-env -iA <attributes...>`` once."""
        self._execute(self.install_command(attributes))

    def shell(self, attributes: Sequence[str]) -> None:
        """Run ``nix-shell -p <packages...>`` once."""
        self._execute(self.shell_command(attributes))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _execute(self, command: list[str]) -> None:
        rendered = shlex.join(command)
        if self._dry_run:
            logger.debug("Dry run, skipping %s", rendered)
            if self._notify is not None:
                self._notify(f"Would run: {rendered}")
            return

        if self._notify is not None:
            self._notify(f"Running: {rendered}")
        result = self._runner.run(command, capture=False)
        if result.returncode != 0:
            raise InstallFailedError(command[0], result.returncode)
