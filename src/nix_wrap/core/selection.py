"""Parsing and validation of the "packages to install" input line.

Grammar::

    line    := [ "s" ] index*
    index   := digit+            (0-based display index)

Blank input (or a bare ``s``) means the user declined.  A leading ``s``
opens a ``nix-shell`` with the selection instead of installing it.

Display indices are 0-based, so the valid range is
``0 .. result_count - 1``.  An index equal to ``result_count`` is
rejected.
"""

from __future__ import annotations

from collections.abc import Sequence

from nix_wrap.core.models import ResultEntry, Selection, SelectionAction
from nix_wrap.exceptions import InvalidIndexError, SelectionNotANumberError

SHELL_MARKER: str = "s"


def _parse_index(token: str, line: str) -> int:
    """Parse a non-negative decimal integer or raise."""
    if not (token.isascii() and token.isdigit()):
        raise SelectionNotANumberError(token, line)
    return int(token)


def _has_shell_marker(body: str) -> bool:
    """Return whether *body* opens with the marker rather than a word like ``sh``."""
    if not body.startswith(SHELL_MARKER):
        return False
    rest = body[len(SHELL_MARKER):]
    return not rest or rest[0].isspace() or (rest[0].isascii() and rest[0].isdigit())


def parse_selection(line: str, result_count: int) -> Selection | None:
    """Validate *line* against *result_count* displayed results.

    Returns ``None`` when the user declined to select anything.

    Raises
    ------
    SelectionNotANumberError
        When a token is not a non-negative integer.
    InvalidIndexError
        When an index is ``>= result_count``.
    """
    body = line.strip()
    action = SelectionAction.INSTALL
    if _has_shell_marker(body):
        action = SelectionAction.SHELL
        body = body[len(SHELL_MARKER):]

    tokens = body.split()
    if not tokens:
        return None

    indices: list[int] = []
    for token in tokens:
        index = _parse_index(token, line)
        if index >= result_count:
            raise InvalidIndexError(index, result_count)
        indices.append(index)

    return Selection(action=action, indices=tuple(indices))


def resolve_attributes(
    selection: Selection,
    entries: Sequence[ResultEntry],
) -> list[str]:
    """Map selected indices back to attribute paths, preserving order.

    *entries* must be the list the indices were validated against.
    """
    return [entries[index].package.attribute for index in selection.indices]
