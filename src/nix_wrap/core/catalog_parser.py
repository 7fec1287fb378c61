"""Raw catalog JSON → :class:`~nix_wrap.core.models.Package` parsing.

``nix-env -q -a --json`` emits an object keyed by attribute path::

    {
      "nixpkgs.hello": {
        "name": "hello-2.12.1",
        "meta": {"description": "A program that produces a familiar, friendly greeting"}
      },
      ...
    }

Entries are parsed independently.  A malformed entry is dropped without
affecting its siblings; only a non-object top level fails the parse.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from nix_wrap.core.models import Package
from nix_wrap.exceptions import MalformedCatalogError

logger = logging.getLogger(__name__)


def _extract_mapping(value: object) -> Mapping[str, Any] | None:
    return value if isinstance(value, Mapping) else None


def _extract_string(value: object) -> str | None:
    return value if isinstance(value, str) else None


def parse_package(attribute: str, entry: object) -> Package | None:
    """Parse one catalog entry, or return ``None`` when it is malformed.

    ``name`` is required and must be a string.  ``meta.description`` is
    optional and falls back to ``""``.
    """
    data = _extract_mapping(entry)
    if data is None:
        return None

    name = _extract_string(data.get("name"))
    if name is None:
        return None

    description = ""
    meta = _extract_mapping(data.get("meta"))
    if meta is not None:
        description = _extract_string(meta.get("description")) or ""

    return Package(attribute=attribute, name=name, description=description)


def parse_catalog(raw: object) -> tuple[Package, ...]:
    """Parse a full catalog snapshot.

    Raises
    ------
    MalformedCatalogError
        When *raw* is not a JSON object.
    """
    catalog = _extract_mapping(raw)
    if catalog is None:
        raise MalformedCatalogError(
            f"Expected a JSON object from nix-env, got {type(raw).__name__}.",
        )

    packages: list[Package] = []
    dropped = 0
    for attribute, entry in catalog.items():
        package = parse_package(str(attribute), entry)
        if package is None:
            dropped += 1
            continue
        packages.append(package)

    if dropped:
        logger.debug("Dropped %d malformed catalog entries", dropped)
    return tuple(packages)
