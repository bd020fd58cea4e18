"""Polynomial and cubic-spline interpolation, smoothing and peak finding."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from astrolab.errors import NumericalError

_NATURAL = 0.99e30
_NATURAL_BOUNDARY = 2e33


def polint(xa: Sequence[float], ya: Sequence[float], x: float) -> tuple[float, float]:
    """Neville interpolation through the points ``(xa, ya)`` evaluated at ``x``.

    Returns the interpolated value and an estimate of its error.
    """
    n = len(xa)
    if n == 0 or n != len(ya):
        raise ValueError("polint needs two non-empty sequences of equal length")
    nearest = min(range(n), key=lambda i: abs(x - xa[i]))
    c = list(ya)
    d = list(ya)
    y = ya[nearest]
    ns = nearest - 1
    dy = 0.0
    for m in range(1, n):
        for i in range(n - m):
            ho = xa[i] - x
            hp = xa[i + m] - x
            w = c[i + 1] - d[i]
            den = ho - hp
            if den == 0.0:
                raise NumericalError("Error in routine polint")
            den = w / den
            d[i] = hp * den
            c[i] = ho * den
        if 2 * (ns + 1) < n - m:
            dy = c[ns + 1]
        else:
            dy = d[ns]
            ns -= 1
        y += dy
    return y, dy


def spline(x: Sequence[float], y: Sequence[float], yp1: float, ypn: float) -> list[float]:
    """Second derivatives of the cubic spline through ``(x, y)``.

    ``yp1`` and ``ypn`` are the first derivatives at the ends; a value above
    0.99e30 selects the natural boundary condition at that end.
    """
    n = len(x)
    if n < 2 or n != len(y):
        raise ValueError("spline needs at least two points and equal lengths")
    y2 = [0.0] * n
    u = [0.0] * n
    if yp1 <= _NATURAL:
        y2[0] = -0.5
        u[0] = (3.0 / (x[1] - x[0])) * ((y[1] - y[0]) / (x[1] - x[0]) - yp1)
    for i in range(1, n - 1):
        sig = (x[i] - x[i - 1]) / (x[i + 1] - x[i - 1])
        p = sig * y2[i - 1] + 2.0
        y2[i] = (sig - 1.0) / p
        slope_change = (y[i + 1] - y[i]) / (x[i + 1] - x[i]) - (y[i] - y[i - 1]) / (x[i] - x[i - 1])
        u[i] = (6.0 * slope_change / (x[i + 1] - x[i - 1]) - sig * u[i - 1]) / p
    if ypn > _NATURAL:
        qn = un = 0.0
    else:
        qn = 0.5
        un = (3.0 / (x[n - 1] - x[n - 2])) * (ypn - (y[n - 1] - y[n - 2]) / (x[n - 1] - x[n - 2]))
    y2[n - 1] = (un - qn * u[n - 2]) / (qn * y2[n - 2] + 1.0)
    for k in range(n - 2, -1, -1):
        y2[k] = y2[k] * y2[k + 1] + u[k]
    return y2


def splint(xa: Sequence[float], ya: Sequence[float], y2a: Sequence[float], x: float) -> float:
    """Evaluate the cubic spline given by ``spline`` at ``x``."""
    n = len(xa)
    if n < 2:
        raise ValueError("splint needs at least two points")
    klo = bisect_right(xa, x, 1, n - 1) - 1
    khi = klo + 1
    h = xa[khi] - xa[klo]
    if h == 0.0:
        raise NumericalError("Bad xa input to routine splint")
    a = (xa[khi] - x) / h
    b = (x - xa[klo]) / h
    return (
        a * ya[klo]
        + b * ya[khi]
        + ((a * a * a - a) * y2a[klo] + (b * b * b - b) * y2a[khi]) * (h * h) / 6.0
    )


def smooth3(data: Sequence[float], nsmooth: int) -> list[float]:
    """Apply ``nsmooth`` passes of a three-point running mean.

    The first point is averaged with its neighbour; the last point is kept
    as it was given.
    """
    values = list(data)
    if nsmooth == 0:
        return values
    if len(values) < 2:
        raise ValueError("smoothing needs at least two points")
    for _ in range(nsmooth):
        first = (values[0] + values[1]) / 2.0
        interior = [
            (left + mid + right) / 3.0
            for left, mid, right in zip(values, values[1:], values[2:])
        ]
        values = [first, *interior, values[-1]]
    return values


def find_max(x: Sequence[float], y: Sequence[float], nsmooth: int) -> tuple[float, float]:
    """Locate the maximum of the smoothed ``y`` and return ``(x_max, y_max)``."""
    nbins = len(y)
    if nbins == 0 or nbins != len(x):
        raise ValueError("find_max needs two non-empty sequences of equal length")
    ys = smooth3(y, nsmooth)

    ymax = -10.0
    left = nbins - 1
    for ibin, value in enumerate(ys[:-1]):
        if value > ymax:
            ymax = value
            left = ibin

    right = left
    for ibin in range((nbins - 1 + left) // 2, left, -1):
        if ys[ibin] > ymax:
            ymax = ys[ibin]
            right = ibin

    return (x[left] + x[right]) / 2, (ys[left] + ys[right]) / 2


def find_max_spline(
    x: Sequence[float], y: Sequence[float], nsmooth: int, steps: int
) -> tuple[float, float]:
    """Locate the maximum of a natural spline through the smoothed data.

    The spline is scanned at ``steps`` evenly spaced points from ``x[0]``
    to ``x[-1]``; returns ``(x_max, y_max)``.
    """
    if steps < 2:
        raise ValueError("steps must be at least 2")
    if len(x) < 2 or x[-1] <= x[0]:
        raise ValueError("x must hold at least two points in ascending order")
    ys = smooth3(y, nsmooth)
    y2 = spline(x, ys, _NATURAL_BOUNDARY, _NATURAL_BOUNDARY)

    maxx = x[0]
    maxy = -1e10
    incr = (x[-1] - x[0]) / (steps - 1)
    xi = x[0]
    while xi <= x[-1]:
        yi = splint(x, ys, y2, xi)
        if yi > maxy:
            maxx, maxy = xi, yi
        xi += incr
    return maxx, maxy