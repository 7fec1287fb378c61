"""Infrastructure layer — external system integration.

This layer wraps all interaction with ``nix-env``, ``nix-shell``,
``git`` and the local filesystem.  Every raw ``OSError`` must be caught
here and re-raised as a :class:`~nix_wrap.exceptions.NixWrapError`
subclass.

Rules
-----
* No imports from ``cli``.
* No direct user-facing output — status notices go through injected
  callables.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from nix_wrap.infra.filesystem import LocalFileSystem
from nix_wrap.infra.nix_env_source import NixEnvCatalogSource
from nix_wrap.infra.nix_installer import NixInstaller
from nix_wrap.infra.process_runner import SubprocessRunner
from nix_wrap.infra.tool_detector import ToolStatus, detect_tool, nix_install_commands

__all__: list[str] = [
    "LocalFileSystem",
    "NixEnvCatalogSource",
    "NixInstaller",
    "SubprocessRunner",
    "ToolStatus",
    "detect_tool",
    "nix_install_commands",
]
