"""Core catalog service — acquire, cache and parse the package catalog.

Depends on a :class:`~nix_wrap.core.protocols.CatalogSource`, a
:class:`~nix_wrap.core.protocols.CatalogCache`, and the filesystem /
process capabilities needed for cache-key derivation, all injected at
construction time.

Guarantees
----------
* Pure orchestration — every side effect happens behind a protocol.
* Only :class:`~nix_wrap.exceptions.NixWrapError` subclasses escape.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from nix_wrap.core.cache import NullCache
from nix_wrap.core.cache_key import default_defexpr_dir, derive_cache_key
from nix_wrap.core.catalog_parser import parse_catalog
from nix_wrap.core.models import Package
from nix_wrap.core.protocols import CatalogCache, CatalogSource, FileSystem, ProcessRunner
from nix_wrap.exceptions import CatalogSourceError, NixWrapError


class CatalogService:
    """Produces the parsed package catalog.

    Parameters
    ----------
    source:
        Backend returning the raw catalog JSON.
    fs, runner:
        Capabilities used to derive the cache key.
    cache:
        Cache consulted with the derived key.  Defaults to
        :class:`~nix_wrap.core.cache.NullCache`.
    defexpr_dir:
        Channel directory to derive the key from.  Defaults to
        ``~/.nix-defexpr``.
    """

    def __init__(
        self,
        source: CatalogSource,
        fs: FileSystem,
        runner: ProcessRunner,
        *,
        cache: CatalogCache | None = None,
        defexpr_dir: Path | None = None,
    ) -> None:
        self._source: CatalogSource = source
        self._fs: FileSystem = fs
        self._runner: ProcessRunner = runner
        self._cache: CatalogCache = cache if cache is not None else NullCache()
        self._defexpr_dir: Path | None = defexpr_dir

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def cache_key(self) -> str:
        """Derive the cache key for the current channel state.

        Raises
        ------
        NoHomeDirectoryError
            When no directory was given and the home directory is unknown.
        NixWrapIOError
            On filesystem or git failures.
        """
        defexpr_dir = self._defexpr_dir
        if defexpr_dir is None:
            defexpr_dir = default_defexpr_dir(self._fs)
        return derive_cache_key(defexpr_dir, self._fs, self._runner)

    def all_packages(self) -> tuple[Package, ...]:
        """Return every well-formed package in the catalog.

        Raises
        ------
        NoHomeDirectoryError, NixWrapIOError
            While deriving the cache key.
        CatalogSourceError
            When the source fails.
        MalformedCatalogError
            When the catalog is not a JSON object.
        """
        key = self.cache_key()
        raw = self._cache.get_or_create(key, self._fetch)
        return parse_catalog(raw)

    # ------------------------------------------------------------------
    # Source delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self) -> Any:
        """Call the source and ensure only our exceptions escape."""
        try:
            return self._source.fetch_catalog()
        except NixWrapError:
            raise
        except Exception as exc:
            raise CatalogSourceError(
                f"Unexpected catalog source error: {exc}",
            ) from exc
