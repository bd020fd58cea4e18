"""Index sorting and table lookup."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence


def indexx(values: Sequence[float]) -> list[int]:
    """Return the indices that put ``values`` in ascending order."""
    return sorted(range(len(values)), key=values.__getitem__)


def locate(table: Sequence[float], x: float) -> int:
    """Find ``j`` with ``table[j] <= x < table[j + 1]`` in an ascending table.

    Below the table 1 is returned, above it ``len(table) - 1``.
    """
    n = len(table)
    if n == 0:
        raise ValueError("cannot locate a value in an empty table")
    if x < table[0]:
        return 1
    if x > table[-1]:
        return n - 1
    return max(bisect_right(table, x, 1, max(n - 1, 1)) - 1, 0)