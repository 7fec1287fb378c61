"""Subprocess-backed implementation of :class:`~nix_wrap.core.protocols.ProcessRunner`.

This module is the **only** place in the codebase that calls
:func:`subprocess.run`.  Launch failures are re-raised as
:class:`~nix_wrap.exceptions.NixWrapIOError`; exit statuses are
returned to the caller untouched.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from nix_wrap.core.models import ProcessResult
from nix_wrap.exceptions import NixWrapIOError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Concrete :class:`ProcessRunner` backed by :func:`subprocess.run`.

    Calls block until the child exits; there is no timeout.
    """

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        capture: bool = True,
    ) -> ProcessResult:
        """Run *command* and return its exit status and decoded output.

        Raises
        ------
        NixWrapIOError
            When the command cannot be started (missing binary,
            permission denied, bad working directory).
        """
        argv = list(command)
        logger.debug("Running %s (cwd=%s)", shlex.join(argv), cwd)
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=capture,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise NixWrapIOError(
                f"Failed to run {argv[0]}: {exc}",
                hint=f"Make sure {argv[0]} is installed and on PATH.",
            ) from exc

        logger.debug("%s exited with status %d", argv[0], completed.returncode)
        return ProcessResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
