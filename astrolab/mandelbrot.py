"""Escape-time iteration counts for the Mandelbrot set on a rectangular grid."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence
from pathlib import Path

C_REAL_MIN = -2.0
C_IMG_MIN = -1.1
C_REAL_MAX = 0.5
C_IMG_MAX = 1.1
NMAX_ITER = 50
ESCAPE_RADIUS = 4.0

OUTPUT_FILE = "mandelbrot.dat"


def mandelbrot_series(c_real: float, c_img: float) -> int:
    """Count iterations of z -> z*z + c (starting at z = c) before |z| > 4.

    ``NMAX_ITER`` means the series did not diverge.
    """
    c = complex(c_real, c_img)
    z = c
    for n in range(1, NMAX_ITER + 1):
        z = z * z + c
        if abs(z) > ESCAPE_RADIUS:
            return n
    return NMAX_ITER


def _axis(lo: float, hi: float, n: int) -> list[float]:
    if n < 2:
        raise ValueError("at least two points per dimension are needed")
    return [(hi - lo) * i / (n - 1) + lo for i in range(n)]


def grid(n_real: int, n_img: int) -> tuple[list[float], list[float]]:
    """Evenly spaced real and imaginary axis values covering the plotting window."""
    return _axis(C_REAL_MIN, C_REAL_MAX, n_real), _axis(C_IMG_MIN, C_IMG_MAX, n_img)


def compute(n_real: int, n_img: int) -> tuple[list[float], list[float], list[list[int]]]:
    """Return the axes and the iteration counts, indexed ``[i_real][i_img]``."""
    c_real, c_img = grid(n_real, n_img)
    converged = [[mandelbrot_series(cr, ci) for ci in c_img] for cr in c_real]
    return c_real, c_img, converged


def write_output(
    path: str | Path,
    c_real: Sequence[float],
    c_img: Sequence[float],
    converged: Sequence[Sequence[int]],
) -> None:
    """Write one ``c_real c_img count`` line per grid point."""
    with open(path, "w", encoding="ascii") as out:
        for cr, row in zip(c_real, converged):
            for ci, count in zip(c_img, row):
                out.write(f"{cr:g} {ci:g} {count}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Compute the grid given on the command line and write ``mandelbrot.dat``."""
    args = list(sys.argv[1:] if argv is None else argv)
    usage = "usage: mandelbrot POINTS_PER_DIM_REAL NPOINTS_PER_DIM_IMG omp_num_threads"
    if len(args) != 3:
        print(usage)
        return 1
    try:
        n_real, n_img, nthreads = (int(a) for a in args)
    except ValueError:
        print(usage)
        return 1

    print(f"ncpus={os.cpu_count()} nthreads={nthreads}")

    start = time.perf_counter()
    c_real, c_img, converged = compute(n_real, n_img)
    print(f"the Mandelbrot loop took {time.perf_counter() - start:.10f} sec. (wall-clock time)")

    start = time.perf_counter()
    try:
        write_output(OUTPUT_FILE, c_real, c_img, converged)
    except OSError:
        print(f"write_output: could not open output file {OUTPUT_FILE}")
        print("Could not write output file\nABORTING")
        return 1
    print(
        f"the writing of the output file took {time.perf_counter() - start:.10f} sec. "
        "(wall-clock time)"
    )
    return 0