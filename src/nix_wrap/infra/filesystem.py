"""Local implementation of :class:`~nix_wrap.core.protocols.FileSystem`."""

from __future__ import annotations

from pathlib import Path

from nix_wrap.exceptions import NixWrapIOError, NoHomeDirectoryError


class LocalFileSystem:
    """Read-only access to the local disk via :mod:`pathlib`.

    Every ``OSError`` is re-raised as :class:`NixWrapIOError`.
    """

    def home_dir(self) -> Path:
        try:
            return Path.home()
        except (KeyError, RuntimeError) as exc:
            raise NoHomeDirectoryError() from exc

    def list_dir(self, path: Path) -> list[Path]:
        try:
            return list(path.iterdir())
        except OSError as exc:
            raise NixWrapIOError(f"Cannot list {path}: {exc}") from exc

    def is_dir(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError as exc:
            raise NixWrapIOError(f"Cannot stat {path}: {exc}") from exc

    def is_file(self, path: Path) -> bool:
        try:
            return path.is_file()
        except OSError as exc:
            raise NixWrapIOError(f"Cannot stat {path}: {exc}") from exc

    def read_text(self, path: Path) -> str:
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise NixWrapIOError(f"Cannot read {path}: {exc}") from exc
