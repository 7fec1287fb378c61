"""nix-wrap — interactive search and install front-end for Nix packages.

Wraps ``nix-env`` behind a strict layered architecture.
"""

from nix_wrap.version import __version__

__all__: list[str] = ["__version__"]
