"""Custom exception hierarchy for nix-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`NixWrapError`.  Raw ``OSError`` / ``json.JSONDecodeError``
instances must NEVER propagate beyond the infrastructure layer — they
are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
NixWrapError
├── NoHomeDirectoryError
├── NixWrapIOError
├── CatalogSourceError
├── MalformedCatalogError
├── SelectionError
│   ├── SelectionNotANumberError
│   └── InvalidIndexError
├── InstallFailedError
└── EnvironmentError
"""

from __future__ import annotations


class NixWrapError(Exception):
    """Base exception for all nix-wrap errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment / filesystem ----------------------------------------------

class NoHomeDirectoryError(NixWrapError):
    """Raised when the home directory (and so ``~/.nix-defexpr``) is unknown."""

    def __init__(self, message: str = "Cannot find home directory.") -> None:
        super().__init__(message, hint="Set the HOME environment variable.")


class NixWrapIOError(NixWrapError):
    """Raised for filesystem or process-launch failures."""


# --- Catalog ----------------------------------------------------------------

class CatalogSourceError(NixWrapError):
    """Raised when ``nix-env`` reports an error or emits unparsable output.

    :attr:`detail` carries the raw stderr (or stdout) text.  It can be
    large, so the CLI only shows it in verbose mode.
    """

    def __init__(
        self,
        message: str,
        *,
        detail: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.detail: str = detail


class MalformedCatalogError(NixWrapError):
    """Raised when the catalog JSON is not an object at the top level."""


# --- Selection --------------------------------------------------------------

class SelectionError(NixWrapError):
    """Base class for invalid package-selection input."""


class SelectionNotANumberError(SelectionError):
    """Raised when a selection token is not a non-negative integer."""

    def __init__(self, token: str, line: str) -> None:
        super().__init__(
            f"Not a number: {token!r}",
            hint="Enter result numbers separated by spaces, e.g. 0 2.",
        )
        self.token: str = token
        self.line: str = line


class InvalidIndexError(SelectionError):
    """Raised when a selected index does not name a displayed result."""

    def __init__(self, index: int, result_count: int) -> None:
        super().__init__(
            f"Invalid index: {index}",
            hint=f"Valid indices are 0 to {result_count - 1}.",
        )
        self.index: int = index
        self.result_count: int = result_count


# --- Install ----------------------------------------------------------------

class InstallFailedError(NixWrapError):
    """Raised when ``nix-env -iA`` or ``nix-shell -p`` exits non-zero."""

    def __init__(self, command: str, returncode: int) -> None:
        super().__init__(f"{command} exited with status {returncode}.")
        self.command: str = command
        self.returncode: int = returncode


# --- Optional dependencies --------------------------------------------------

class EnvironmentError(NixWrapError):
    """Raised when a required runtime dependency is not available."""
