"""``nix-env`` backed implementation of :class:`~nix_wrap.core.protocols.CatalogSource`.

Anything ``nix-env`` writes to stderr is treated as a failure, even when
it exits successfully: evaluation warnings there usually mean the
catalog on stdout is incomplete.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from nix_wrap.core.protocols import ProcessRunner
from nix_wrap.exceptions import CatalogSourceError
from nix_wrap.utils.constants import QUERY_COMMAND, REFRESHING_NOTICE

logger = logging.getLogger(__name__)

STDERR_MESSAGE: str = "nix-env posted to stderr."
PARSE_MESSAGE: str = "Failed to parse stdout as JSON."


class NixEnvCatalogSource:
    """Concrete :class:`CatalogSource` running ``nix-env -q -a --json``.

    Parameters
    ----------
    runner:
        Process runner used to launch ``nix-env``.
    notify:
        Optional callable receiving a one-line status notice before the
        (slow) query starts.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        *,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._runner: ProcessRunner = runner
        self._notify: Callable[[str], None] | None = notify

    def fetch_catalog(self) -> Any:
        """Query ``nix-env`` and return the decoded JSON.

        Raises
        ------
        NixWrapIOError
            When ``nix-env`` cannot be started.
        CatalogSourceError
            When ``nix-env`` writes to stderr or stdout is not JSON.
        """
        if self._notify is not None:
            self._notify(REFRESHING_NOTICE)
        logger.debug(REFRESHING_NOTICE)

        result = self._runner.run(QUERY_COMMAND)

        if result.stderr:
            raise CatalogSourceError(
                STDERR_MESSAGE,
                detail=result.stderr,
                hint="Maybe the nixpkgs evaluation is broken. Re-run with --verbose for details.",
            )

        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise CatalogSourceError(PARSE_MESSAGE, detail=result.stdout) from exc
