"""Small series: a fast-converging pi series and repeated growth sequences."""

from __future__ import annotations

import math

GROWTH = 1.01


def pi_series(terms: int) -> float:
    """Approximate pi by sqrt(12) * sum of (-1/3)**k / (2k + 1) over ``terms`` terms."""
    if terms < 0:
        raise ValueError("terms must not be negative")
    total = sum((-1.0 / 3.0) ** k / (2.0 * k + 1.0) for k in range(terms))
    return total * math.sqrt(12)


def calculation(i: int, b: float) -> float:
    """Make ``b`` one percent larger, ``i`` times over."""
    for _ in range(i):
        b = GROWTH * b
    return b


def doubling_sequence(n: int = 10, start: float = 2.0) -> list[float]:
    """Return ``n`` values starting at ``start``, each twice the one before."""
    if n < 0:
        raise ValueError("n must not be negative")
    values = []
    for i in range(n):
        b = start
        for _ in range(i):
            b = 2 * b
        values.append(b)
    return values