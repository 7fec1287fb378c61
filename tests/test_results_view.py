"""Tests for result rendering and the selection prompt (cli layer).

questionary is always mocked; no terminal interaction happens.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from nix_wrap.cli.results_view import format_result, no_matches_message, render_results
from nix_wrap.cli.selection_prompt import PROMPT, prompt_selection
from nix_wrap.core.models import Package, ResultEntry, Selection, SelectionAction
from nix_wrap.exceptions import InvalidIndexError, SelectionNotANumberError


def _entry(index: int, name: str, description: str = "") -> ResultEntry:
    return ResultEntry(
        index=index,
        package=Package(attribute=f"nixpkgs.{name}", name=name, description=description),
    )


# ---------------------------------------------------------------------------
# format_result
# ---------------------------------------------------------------------------

class TestFormatResult:
    def test_layout(self) -> None:
        text = format_result(_entry(3, "hello", "A program"), lambda s: s)
        first, second = text.split("\n")
        assert first.startswith("[black on yellow]3[/black on yellow]")
        assert "[bold]hello[/bold]" in first
        assert "[dim](nixpkgs.hello)[/dim]" in first
        assert second == "    A program"

    def test_empty_description_still_two_lines(self) -> None:
        text = format_result(_entry(0, "hello"), lambda s: s)
        assert text.endswith("\n    ")

    def test_escape_applied_to_package_text(self) -> None:
        text = format_result(_entry(0, "hello", "[red]x"), lambda s: s.upper())
        assert "HELLO" in text
        assert "[RED]X" in text


class TestNoMatchesMessage:
    def test_quotes_query(self) -> None:
        assert no_matches_message("zzz") == 'No packages matched "zzz".'


# ---------------------------------------------------------------------------
# render_results
# ---------------------------------------------------------------------------

class TestRenderResults:
    def test_prints_every_entry_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_results([_entry(0, "hello", "greets"), _entry(1, "cowsay", "talks")])
        out = capsys.readouterr().out
        assert out.index("hello") < out.index("cowsay")
        assert "nixpkgs.cowsay" in out
        assert "greets" in out

    def test_markup_in_description_is_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_results([_entry(0, "hello", "uses [bold] tags")])
        assert "[bold] tags" in capsys.readouterr().out

    def test_empty_list_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_results([])
        assert capsys.readouterr().out == ""


# ---------------------------------------------------------------------------
# prompt_selection
# ---------------------------------------------------------------------------

class TestPromptSelection:
    def test_reader_receives_prompt(self) -> None:
        reader = MagicMock(return_value="0")
        prompt_selection(2, reader)
        reader.assert_called_once_with(PROMPT)

    def test_parses_indices(self) -> None:
        selection = prompt_selection(3, lambda _p: "2 0")
        assert selection == Selection(SelectionAction.INSTALL, (2, 0))

    def test_shell_prefix(self) -> None:
        selection = prompt_selection(3, lambda _p: "s 1")
        assert selection is not None
        assert selection.action is SelectionAction.SHELL

    def test_blank_line_returns_none(self) -> None:
        assert prompt_selection(3, lambda _p: "   ") is None

    def test_cancel_raises_keyboard_interrupt(self) -> None:
        with pytest.raises(KeyboardInterrupt):
            prompt_selection(3, lambda _p: None)

    def test_invalid_input_propagates(self) -> None:
        with pytest.raises(SelectionNotANumberError):
            prompt_selection(3, lambda _p: "0 x")
        with pytest.raises(InvalidIndexError):
            prompt_selection(3, lambda _p: "3")

    @patch("nix_wrap.cli.selection_prompt._import_questionary")
    def test_default_reader_uses_questionary(self, mock_import: MagicMock) -> None:
        questionary = mock_import.return_value
        questionary.text.return_value.ask.return_value = "1"

        selection = prompt_selection(2)

        assert selection == Selection(SelectionAction.INSTALL, (1,))
        args, _kwargs = questionary.text.call_args
        assert args[0] == PROMPT
