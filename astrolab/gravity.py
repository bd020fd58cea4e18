"""One-dimensional self-gravitating particles integrated with the Euler method."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

N_PARTICLES = 13
N_STEPS = 250
DT = 1e-4
CENTRAL_MASS = 1.5


def acceleration(x: Sequence[float], m: Sequence[float], n: int) -> float:
    """Acceleration on particle ``n`` from all other particles (G = 1)."""
    xn = x[n]
    total = 0.0
    for k, (xk, mk) in enumerate(zip(x, m)):
        if k == n:
            continue
        d = xn - xk
        total += -mk / (d * d) * (d / abs(d))
    return total


def initial_configuration(n_particles: int = N_PARTICLES) -> tuple[list[float], list[float]]:
    """Evenly spaced particles on [0, 1] with unit masses and a heavier centre.

    Returns the positions and the masses.
    """
    if n_particles < 2:
        raise ValueError("at least two particles are needed")
    x = [n / (n_particles - 1.0) for n in range(n_particles)]
    m = [1.0] * n_particles
    m[int(n_particles / 2.0 + 1.0) - 1] = CENTRAL_MASS
    return x, m


def simulate(
    n_particles: int = N_PARTICLES, steps: int = N_STEPS, dt: float = DT
) -> tuple[list[float], list[float]]:
    """Integrate the particles from rest; returns final positions and velocities."""
    x, m = initial_configuration(n_particles)
    v = [0.0] * n_particles
    for _ in range(steps):
        acc = [acceleration(x, m, n) for n in range(n_particles)]
        x = [xn + vn * dt for xn, vn in zip(x, v)]
        v = [vn + an * dt for vn, an in zip(v, acc)]
    return x, v


def write_positions(path: str | Path, x: Sequence[float]) -> None:
    """Write one ``position 0`` line per particle."""
    with open(path, "w", encoding="ascii") as out:
        for xn in x:
            out.write(f"{xn:f} 0\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Write the initial and final configurations to ``posI.txt`` and ``posF.txt``."""
    del argv
    x, _ = initial_configuration(N_PARTICLES)
    write_positions("posI.txt", x)
    final, _ = simulate(N_PARTICLES, N_STEPS, DT)
    write_positions("posF.txt", final)
    print("wrote posI.txt and posF.txt", file=sys.stderr)
    return 0