"""Pure query filtering and display-index assignment.

Every function in this module is a pure transformation — no I/O, no
side effects, and no reordering.

Pipeline order:

1. **Filter** — keep packages whose attribute, name or description
   contains the query (case-sensitive).
2. **Index** — number the survivors 0..N-1 in the order received.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from nix_wrap.core.models import Package, ResultEntry


def filter_packages(query: str, packages: Iterable[Package]) -> list[Package]:
    """Return the packages matching *query*, in source order.

    An empty query matches every package.
    """
    return [package for package in packages if package.matches(query)]


def index_results(packages: Sequence[Package]) -> list[ResultEntry]:
    """Pair each package with its 0-based display index."""
    return [
        ResultEntry(index=index, package=package)
        for index, package in enumerate(packages)
    ]


def search(query: str, packages: Iterable[Package]) -> list[ResultEntry]:
    """Run the full filter → index pipeline."""
    return index_results(filter_packages(query, packages))
