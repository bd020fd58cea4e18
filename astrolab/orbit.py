"""Earth's orbit around the Sun integrated with leapfrog and fourth-order Runge-Kutta."""

from __future__ import annotations

import math
import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# Units: [l] = m, [m] = kg, [t] = s
GRAV = 6.6726e-11
MSUN = 1.989e30
MEARTH = 5.973e24
DSE = 1.496e11
NYEARS = 5
TEND = float(NYEARS * 365 * 24 * 60 * 60)

HEADER = "#     x(1)             y(2)                vx(3)            vy(4)\n"


class Method(str, Enum):
    """Available integration schemes."""

    LEAPFROG = "leapfrog"
    RUNGEKUTTA4 = "rk4"


@dataclass(frozen=True)
class OrbitState:
    """Position and velocity in the orbital plane."""

    x: float
    y: float
    vx: float
    vy: float


def gm_over_r3(x: float, y: float) -> float:
    """Return G*Msun / r**3 at the position ``(x, y)``."""
    return GRAV * MSUN / (x * x + y * y) ** 1.5


def _derivative(state: OrbitState) -> OrbitState:
    gm = gm_over_r3(state.x, state.y)
    return OrbitState(state.vx, state.vy, -gm * state.x, -gm * state.y)


def _advance(state: OrbitState, rate: OrbitState, h: float) -> OrbitState:
    return OrbitState(
        state.x + rate.x * h,
        state.y + rate.y * h,
        state.vx + rate.vx * h,
        state.vy + rate.vy * h,
    )


def leapfrog_step(state: OrbitState, dt: float) -> OrbitState:
    """Advance one drift-kick-drift leapfrog step of size ``dt``."""
    xmid = state.x + state.vx * dt / 2.0
    ymid = state.y + state.vy * dt / 2.0
    gm = gm_over_r3(xmid, ymid)
    vx = state.vx - gm * xmid * dt
    vy = state.vy - gm * ymid * dt
    return OrbitState(xmid + vx * dt / 2.0, ymid + vy * dt / 2.0, vx, vy)


def rungekutta4_step(state: OrbitState, dt: float) -> OrbitState:
    """Advance one classical fourth-order Runge-Kutta step of size ``dt``."""
    k1 = _derivative(state)
    k2 = _derivative(_advance(state, k1, dt / 2.0))
    k3 = _derivative(_advance(state, k2, dt / 2.0))
    k4 = _derivative(_advance(state, k3, dt))
    return OrbitState(
        state.x + (k1.x + 2 * k2.x + 2 * k3.x + k4.x) / 6.0 * dt,
        state.y + (k1.y + 2 * k2.y + 2 * k3.y + k4.y) / 6.0 * dt,
        state.vx + (k1.vx + 2 * k2.vx + 2 * k3.vx + k4.vx) / 6.0 * dt,
        state.vy + (k1.vy + 2 * k2.vy + 2 * k3.vy + k4.vy) / 6.0 * dt,
    )


_STEPPERS = {
    Method.LEAPFROG: leapfrog_step,
    Method.RUNGEKUTTA4: rungekutta4_step,
}


def _initial_state() -> OrbitState:
    return OrbitState(DSE, 0.0, 0.0, math.sqrt(GRAV * MSUN / DSE))


def integrate_orbit(nsteps: int, method: str | Method) -> list[OrbitState]:
    """Integrate the orbit over ``TEND`` seconds, returning ``nsteps`` states.

    ``method`` is ``"leapfrog"`` or ``"rk4"``.
    """
    stepper = _STEPPERS[Method(method)]
    if nsteps < 1:
        raise ValueError("nsteps must be at least 1")
    states = [_initial_state()]
    if nsteps == 1:
        return states
    dt = TEND / (nsteps - 1)
    for _ in range(nsteps - 1):
        states.append(stepper(states[-1], dt))
    return states


def write_orbit(states: Iterable[OrbitState], path: str | Path) -> None:
    """Write the states as a whitespace-separated table with a header line."""
    with open(path, "w", encoding="ascii") as out:
        out.write(HEADER)
        for s in states:
            out.write(f"{s.x:g} {s.y:g} {s.vx:g} {s.vy:g}\n")
    print(f"wrote output file {path}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Integrate with both schemes and write ``lfrog.dat`` and ``rk4.dat``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: orbit Nsteps")
        return 1
    try:
        nsteps = int(args[0])
    except ValueError:
        print("Usage: orbit Nsteps")
        return 1

    timings = {}
    results = {}
    for method in Method:
        start = time.perf_counter()
        results[method] = integrate_orbit(nsteps, method)
        timings[method] = time.perf_counter() - start

    print(f"Total time elapsed for leapfrog: {timings[Method.LEAPFROG]} seconds")
    print(f"Total time elapsed for rungekutta4: {timings[Method.RUNGEKUTTA4]} seconds")

    write_orbit(results[Method.LEAPFROG], "lfrog.dat")
    write_orbit(results[Method.RUNGEKUTTA4], "rk4.dat")
    return 0