"""Definite integrals by adaptive fifth-order Runge-Kutta (Cash-Karp) steps."""

from __future__ import annotations

from collections.abc import Callable

MAXSTEPS = 1_000_000_000

_SAFETY = 0.9
_PGROW = -0.2
_PSHRINK = -0.25
_ERRCON = 1.89e-4

_A3 = 0.3
_A4 = 0.6
_A5 = 1.0
_A6 = 0.875
_C1 = 37.0 / 378.0
_C3 = 250.0 / 621.0
_C4 = 125.0 / 594.0
_C6 = 512.0 / 1771.0
_DC1 = _C1 - 2825.0 / 27648.0
_DC3 = _C3 - 18575.0 / 48384.0
_DC4 = _C4 - 13525.0 / 55296.0
_DC5 = -277.0 / 14336.0
_DC6 = _C6 - 0.25


def _rk_step(
    func: Callable[[float], float], y: float, dydx: float, x: float, h: float
) -> tuple[float, float]:
    """One Cash-Karp step for dy/dx = func(x); returns the new y and its error."""
    ak3 = func(x + _A3 * h)
    ak4 = func(x + _A4 * h)
    ak5 = func(x + _A5 * h)
    ak6 = func(x + _A6 * h)
    yout = y + h * (_C1 * dydx + _C3 * ak3 + _C4 * ak4 + _C6 * ak6)
    yerr = h * (_DC1 * dydx + _DC3 * ak3 + _DC4 * ak4 + _DC5 * ak5 + _DC6 * ak6)
    return yout, yerr


def _adaptive_step(
    func: Callable[[float], float],
    y: float,
    dydx: float,
    x: float,
    htry: float,
    eps: float,
    yscale: float,
) -> tuple[float, float, float]:
    """Take one step with error control; returns the new x, new y and next step size."""
    h = htry
    errmax = 10.0
    ytemp = y
    while errmax > 1.0:
        ytemp, yerr = _rk_step(func, y, dydx, x, h)
        errmax = abs(yerr / yscale) / eps
        if errmax > 1.0:
            htemp = _SAFETY * h * errmax**_PSHRINK
            hold = h
            temp = max(abs(htemp), 0.1 * abs(h))
            h = abs(temp) if h >= 0 else -abs(temp)
            if abs((x + h) - x) < 1e-5:
                h = hold
                errmax = 0.0
    if errmax > _ERRCON:
        hnext = _SAFETY * h * errmax**_PGROW
    else:
        hnext = 5.0 * h
    return x + h, ytemp, hnext


def integrate(
    func: Callable[[float], float], a: float, b: float, step: float, eps: float
) -> float:
    """Integrate ``func`` from ``a`` to ``b`` to relative accuracy ``eps``.

    ``step`` is the first trial step size.
    """
    x = a
    dx = step
    y = 0.0
    nstep = 0
    while (x - b) * (b - a) < 0.0 and nstep < MAXSTEPS:
        nstep += 1
        dydx = func(x)
        yscale = max(abs(y) + abs(dx * dydx), 1.0e-8)
        if (x + dx - b) * (x + dx - a) > 0.0:
            dx = b - x
        x, y, dx = _adaptive_step(func, y, dydx, x, dx, eps, yscale)
    return y