"""CLI console helpers with optional Rich support.

Module-level imports of optional UI dependencies are avoided so
bootstrap paths (``--help``, ``--version``) keep working when Rich is
not installed.
"""

from __future__ import annotations

from typing import Any

from nix_wrap.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console writing to stdout.

    Highlighting and emoji codes are disabled: package descriptions
    are arbitrary text.
    """
    console_class = _load_rich_console_class()
    return console_class(highlight=False, emoji=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, **options: Any) -> None:
        """Render with Rich when available, else plain print.

        *options* are Rich keyword arguments (``style``, ``markup``, ...)
        and are ignored by the plain fallback.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects)
            return
        rich_console.print(*objects, **options)


console = _ConsoleProxy()


def status(message: str) -> None:
    """Print a one-line status notice (e.g. ``Refreshing cache.``)."""
    console.print(message, style="cyan", markup=False)


def escape_markup(text: str) -> str:
    """Escape Rich markup in *text*; unchanged when Rich is absent."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)
