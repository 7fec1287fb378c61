"""Rendering of the numbered search-result list.

Each result is printed as::

    <index> <name> (<attribute>)
        <description>

with the index on a yellow badge, the name in bold and the attribute
dimmed.  Rendering never mutates or reorders the entries.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from nix_wrap.cli.console import console
from nix_wrap.core.models import ResultEntry
from nix_wrap.exceptions import EnvironmentError


def _import_escape() -> Callable[[str], str]:
    """Import rich's markup escaper lazily."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return escape


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_result(entry: ResultEntry, escape: Callable[[str], str]) -> str:
    """Build the two-line Rich markup for one result."""
    package = entry.package
    return (
        f"[black on yellow]{entry.index}[/black on yellow] "
        f"[bold]{escape(package.name)}[/bold] "
        f"[dim]({escape(package.attribute)})[/dim]\n"
        f"    {escape(package.description)}"
    )


def no_matches_message(query: str) -> str:
    return f'No packages matched "{query}".'


# ---------------------------------------------------------------------------
# Public rendering
# ---------------------------------------------------------------------------

def render_results(entries: Sequence[ResultEntry]) -> None:
    """Print every entry in display-index order."""
    escape = _import_escape()
    for entry in entries:
        console.print(format_result(entry, escape))
