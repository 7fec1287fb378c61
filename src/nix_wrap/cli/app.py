"""CLI application entry point and command routing for nix-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~nix_wrap.exceptions.NixWrapError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from nix_wrap.cli import exit_codes
from nix_wrap.cli.console import console, escape_markup
from nix_wrap.exceptions import CatalogSourceError, NixWrapError
from nix_wrap.version import __version__

logger = logging.getLogger(__name__)

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``nix-wrap <query>``       — search, then interactively install
    * ``nix-wrap --doctor``      — environment diagnostics
    * ``nix-wrap --version``
    """
    parser = argparse.ArgumentParser(
        prog="nix-wrap",
        description="Search and install Nix packages.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Package to search for (substring of attribute, name or description).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output, including raw nix-env errors, to stderr.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the nix-env / nix-shell command instead of running it.",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check the environment and exit.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_search(query: str, *, dry_run: bool = False) -> int:
    """Search the catalog and install the packages the user picks.

    Flow:
    1. Instantiate infra adapters + core services.
    2. Derive the cache key and load the parsed catalog.
    3. Filter by *query* and render the numbered results.
    4. Prompt once for the indices to act on.
    5. Install (or open a shell with) the selected attributes.
    """
    from nix_wrap.cli.console import status
    from nix_wrap.cli.results_view import no_matches_message, render_results
    from nix_wrap.cli.selection_prompt import prompt_selection
    from nix_wrap.core.catalog_service import CatalogService
    from nix_wrap.core.install_service import InstallService
    from nix_wrap.core.query_filter import search
    from nix_wrap.infra.filesystem import LocalFileSystem
    from nix_wrap.infra.nix_env_source import NixEnvCatalogSource
    from nix_wrap.infra.nix_installer import NixInstaller
    from nix_wrap.infra.process_runner import SubprocessRunner

    runner = SubprocessRunner()
    catalog_service = CatalogService(
        NixEnvCatalogSource(runner, notify=status),
        LocalFileSystem(),
        runner,
    )

    packages = catalog_service.all_packages()
    entries = search(query, packages)
    logger.debug("%d of %d packages matched %r", len(entries), len(packages), query)

    if not entries:
        console.print(no_matches_message(query), markup=False)
        return exit_codes.SUCCESS

    render_results(entries)

    selection = prompt_selection(len(entries))
    if selection is None:
        console.print("Nothing to install.")
        return exit_codes.SUCCESS

    install_service = InstallService(
        NixInstaller(runner, dry_run=dry_run, notify=status),
    )
    install_service.apply(selection, entries)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from nix_wrap.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the nix-wrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.doctor:
        return _handle_doctor()

    if args.query is None:
        parser.error("the following arguments are required: query")

    return _handle_search(args.query, dry_run=args.dry_run)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a
    raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except NixWrapError as exc:
        if isinstance(exc, CatalogSourceError) and exc.detail:
            logger.debug("Catalog source output:\n%s", exc.detail)
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
