"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or subprocess access — only through protocols.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from nix_wrap.core.cache import MemoryCache, NullCache
from nix_wrap.core.catalog_service import CatalogService
from nix_wrap.core.install_service import InstallService
from nix_wrap.core.models import (
    Package,
    ProcessResult,
    ResultEntry,
    Selection,
    SelectionAction,
)
from nix_wrap.core.protocols import (
    CatalogCache,
    CatalogSource,
    FileSystem,
    LineReader,
    PackageInstaller,
    ProcessRunner,
)

__all__: list[str] = [
    "CatalogCache",
    "CatalogService",
    "CatalogSource",
    "FileSystem",
    "InstallService",
    "LineReader",
    "MemoryCache",
    "NullCache",
    "Package",
    "PackageInstaller",
    "ProcessResult",
    "ProcessRunner",
    "ResultEntry",
    "Selection",
    "SelectionAction",
]
