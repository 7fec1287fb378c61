"""Catalog cache implementations.

Both classes satisfy :class:`~nix_wrap.core.protocols.CatalogCache`.
Neither persists anything beyond the current process.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


class NullCache:
    """Cache that never caches: every call runs *producer*."""

    def get_or_create(self, key: str, producer: Callable[[], T]) -> T:
        return producer()


class MemoryCache:
    """In-process cache calling *producer* at most once per key.

    A producer that raises stores nothing, so the next call with the
    same key retries.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get_or_create(self, key: str, producer: Callable[[], T]) -> T:
        if key in self._entries:
            return self._entries[key]  # type: ignore[no-any-return]
        value = producer()
        self._entries[key] = value
        return value

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Forget every stored value."""
        self._entries.clear()
