"""Interactive "packages to install" prompt.

Reads exactly one line through a :class:`~nix_wrap.core.protocols.LineReader`
(questionary's text prompt by default) and hands it to
:func:`~nix_wrap.core.selection.parse_selection`.
"""

from __future__ import annotations

from typing import Any

from nix_wrap.core.models import Selection
from nix_wrap.core.protocols import LineReader
from nix_wrap.core.selection import parse_selection
from nix_wrap.exceptions import EnvironmentError

PROMPT: str = "Packages to install:"
INSTRUCTION: str = "(numbers separated by spaces; prefix with 's' for nix-shell)"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def questionary_line_reader(prompt: str) -> str | None:
    """Default :class:`LineReader`: a questionary free-text prompt.

    Returns ``None`` when the user cancels with Ctrl+C.
    """
    questionary = _import_questionary()
    answer: str | None = questionary.text(prompt, instruction=INSTRUCTION).ask()
    return answer


def prompt_selection(
    result_count: int,
    reader: LineReader | None = None,
) -> Selection | None:
    """Ask once which results to act on.

    Returns ``None`` when the user entered nothing.

    Raises
    ------
    KeyboardInterrupt
        If the user cancels the prompt.
    SelectionNotANumberError, InvalidIndexError
        If the input does not name displayed results.
    """
    read_line = reader if reader is not None else questionary_line_reader
    line = read_line(PROMPT)
    if line is None:
        raise KeyboardInterrupt
    return parse_selection(line, result_count)
