"""Infrastructure: detection of the external Nix / git tooling.

Used by the ``--doctor`` diagnostics.  Detection goes through
:func:`shutil.which` only — no subprocess, no PATH modification, no
automatic installation.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for one executable.

    Attributes
    ----------
    name : str
        Executable name that was searched for.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    """

    name: str
    found: bool
    path: Path | None


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe PATH for *name*.

    Returns a :class:`ToolStatus` whether or not the tool is present —
    the caller decides whether to fail or merely warn.
    """
    result = shutil.which(name)
    if result is None:
        return ToolStatus(name=name, found=False, path=None)
    return ToolStatus(name=name, found=True, path=Path(result).resolve())


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def nix_install_commands() -> tuple[str, ...]:
    """Return Nix install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "linux":
        return ("sh <(curl -L https://nixos.org/nix/install) --daemon",)
    if system == "darwin":
        return ("sh <(curl -L https://nixos.org/nix/install)",)
    return ("See https://nixos.org/download for supported platforms.",)
