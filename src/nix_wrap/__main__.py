"""Allow ``python -m nix_wrap`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m nix_wrap`` behaves identically to the ``nix-wrap`` console
script.
"""

from __future__ import annotations

from nix_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
