"""Domain models for nix-wrap.

All models are **frozen** dataclasses — immutable value objects with
no I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Catalog entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Package:
    """One installable entry of the Nix package catalog."""

    attribute: str
    """Attribute path passed to ``nix-env -iA`` (e.g. ``nixpkgs.hello``)."""

    name: str
    """Package name including version (e.g. ``hello-2.12.1``)."""

    description: str = ""
    """``meta.description``, or empty when the catalog has none."""

    def matches(self, query: str) -> bool:
        """Return whether *query* is a substring of any displayed field."""
        return (
            query in self.attribute
            or query in self.name
            or query in self.description
        )


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResultEntry:
    """A package paired with the index the user selects it by."""

    index: int
    package: Package


class SelectionAction(enum.Enum):
    """What to do with the selected packages."""

    INSTALL = "install"
    SHELL = "shell"


@dataclass(frozen=True, slots=True)
class Selection:
    """Validated user selection.

    ``indices`` keeps the order the user typed them in, duplicates
    included.
    """

    action: SelectionAction
    indices: tuple[int, ...]


# ---------------------------------------------------------------------------
# External processes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of a finished subprocess.

    ``stdout`` / ``stderr`` are empty when output was not captured.
    """

    returncode: int
    stdout: str = ""
    stderr: str = ""
