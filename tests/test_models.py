"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and the substring matching rule.
"""

from __future__ import annotations

import dataclasses

import pytest

from nix_wrap.core.models import (
    Package,
    ProcessResult,
    ResultEntry,
    Selection,
    SelectionAction,
)


def _make_package(**overrides: object) -> Package:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "attribute": "nixpkgs.hello",
        "name": "hello-2.12.1",
        "description": "A program that produces a familiar, friendly greeting",
    }
    defaults.update(overrides)
    return Package(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Package
# ---------------------------------------------------------------------------

class TestPackage:
    def test_description_defaults_to_empty(self) -> None:
        assert Package(attribute="nixpkgs.a", name="a").description == ""

    def test_frozen(self) -> None:
        pkg = _make_package()
        with pytest.raises(dataclasses.FrozenInstanceError):
            pkg.name = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _make_package() == _make_package()


class TestPackageMatches:
    @pytest.mark.parametrize("query", ["nixpkgs.hel", "2.12", "friendly"])
    def test_matches_each_field(self, query: str) -> None:
        assert _make_package().matches(query)

    def test_empty_query_matches(self) -> None:
        assert _make_package().matches("")

    def test_case_sensitive(self) -> None:
        assert not _make_package().matches("HELLO")

    def test_no_match(self) -> None:
        assert not _make_package().matches("cowsay")


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestSelection:
    def test_keeps_typed_order_and_duplicates(self) -> None:
        sel = Selection(action=SelectionAction.INSTALL, indices=(2, 0, 2))
        assert sel.indices == (2, 0, 2)
        assert sel.action is SelectionAction.INSTALL

    def test_is_frozen(self) -> None:
        sel = Selection(action=SelectionAction.SHELL, indices=(0,))
        with pytest.raises(dataclasses.FrozenInstanceError):
            sel.indices = (1,)  # type: ignore[misc]


class TestResultEntryAndProcessResult:
    def test_result_entry_fields(self) -> None:
        entry = ResultEntry(index=3, package=_make_package())
        assert entry.index == 3
        assert entry.package.attribute == "nixpkgs.hello"

    def test_process_result_defaults(self) -> None:
        result = ProcessResult(returncode=0)
        assert result.stdout == ""
        assert result.stderr == ""
