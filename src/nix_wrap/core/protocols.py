"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so every piece of logic can be exercised against
fakes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Protocol, TypeVar

from nix_wrap.core.models import ProcessResult

T = TypeVar("T")


class ProcessRunner(Protocol):
    """Contract for launching external commands.

    Implementations block until the process exits and map launch
    failures to :class:`~nix_wrap.exceptions.NixWrapIOError`.  A
    non-zero exit status is *not* an error at this level.
    """

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        capture: bool = True,
    ) -> ProcessResult:
        """Run *command* and return its exit status and output.

        When *capture* is ``False`` the child inherits the terminal and
        the returned ``stdout`` / ``stderr`` are empty.
        """
        ...  # pragma: no cover


class FileSystem(Protocol):
    """Read-only view of the filesystem used for cache-key derivation.

    Implementations map ``OSError`` to
    :class:`~nix_wrap.exceptions.NixWrapIOError`.
    """

    def home_dir(self) -> Path:
        """Return the user's home directory.

        Raises
        ------
        NoHomeDirectoryError
            When the home directory cannot be determined.
        """
        ...  # pragma: no cover

    def list_dir(self, path: Path) -> list[Path]:
        """Return the direct children of *path*, in no particular order."""
        ...  # pragma: no cover

    def is_dir(self, path: Path) -> bool:
        ...  # pragma: no cover

    def is_file(self, path: Path) -> bool:
        ...  # pragma: no cover

    def read_text(self, path: Path) -> str:
        ...  # pragma: no cover


class CatalogSource(Protocol):
    """Contract for the backend producing the raw package catalog."""

    def fetch_catalog(self) -> Any:
        """Return the decoded catalog JSON.

        Raises
        ------
        CatalogSourceError
            When the backend reports an error or its output is not JSON.
        NixWrapIOError
            When the backend cannot be started.
        """
        ...  # pragma: no cover


class CatalogCache(Protocol):
    """Keyed memoisation of an expensive producer.

    Any implementation must return a value observably identical to what
    *producer* would have returned for *key*; implementations differ
    only in how often *producer* is called.
    """

    def get_or_create(self, key: str, producer: Callable[[], T]) -> T:
        ...  # pragma: no cover


class LineReader(Protocol):
    """Reads one line of user input after showing *prompt*.

    Returns ``None`` when the user cancels the prompt.
    """

    def __call__(self, prompt: str) -> str | None:
        ...  # pragma: no cover


class PackageInstaller(Protocol):
    """Contract for acting on selected attribute paths."""

    def install(self, attributes: Sequence[str]) -> None:
        """Install all *attributes* with a single backend invocation."""
        ...  # pragma: no cover

    def shell(self, attributes: Sequence[str]) -> None:
        """Open an interactive shell providing *attributes*."""
        ...  # pragma: no cover
