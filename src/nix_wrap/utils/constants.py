"""Fixed command lines, file names, and status text.

Nothing here is user-configurable; the values mirror the interfaces of
the external Nix tooling.
"""

from __future__ import annotations

NIX_ENV: str = "nix-env"
NIX_SHELL: str = "nix-shell"
GIT: str = "git"

QUERY_COMMAND: tuple[str, ...] = (NIX_ENV, "-q", "-a", "--json")
"""List every available package as JSON."""

INSTALL_COMMAND: tuple[str, ...] = (NIX_ENV, "-iA")
"""Prefix for installing packages by attribute path."""

SHELL_COMMAND: tuple[str, ...] = (NIX_SHELL, "-p")
"""Prefix for an ad-hoc shell containing the given packages."""

REVISION_COMMAND: tuple[str, ...] = (GIT, "rev-parse", "--verify", "HEAD")
"""Working-copy revision of a git-backed channel (run inside the channel)."""

DEFEXPR_DIRNAME: str = ".nix-defexpr"
MANIFEST_FILENAME: str = "manifest.nix"
GIT_DIRNAME: str = ".git"

NIXPKGS_PREFIX: str = "nixpkgs."
"""Channel prefix carried by ``nix-env`` attributes but not by ``nix-shell -p``."""

REFRESHING_NOTICE: str = "Refreshing cache."
