"""Reading halo catalogues, their centre of mass, and writing them back."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Halo:
    """A halo's position and mass."""

    r: tuple[float, float, float]
    m: float


def _leading_floats(line: str, count: int) -> list[float]:
    values: list[float] = []
    for token in line.split()[:count]:
        try:
            values.append(float(token))
        except ValueError:
            break
    return values + [0.0] * (count - len(values))


def read_halos(path: str | Path) -> list[Halo]:
    """Read ``x y z m`` lines, skipping lines that start with ``#``.

    Fields that cannot be read are left at zero.
    """
    halos = []
    with open(path, encoding="ascii") as handle:
        for line in handle:
            if line.startswith("#"):
                continue
            x, y, z, m = _leading_floats(line, 4)
            halos.append(Halo((x, y, z), m))
    return halos


def center_of_mass(halos: Iterable[Halo]) -> tuple[float, float, float]:
    """Mass-weighted mean position of the halos."""
    sums = [0.0, 0.0, 0.0]
    total = 0.0
    for halo in halos:
        for axis, coord in enumerate(halo.r):
            sums[axis] += coord * halo.m
        total += halo.m
    if total == 0.0:
        raise ValueError("total mass is zero")
    return (sums[0] / total, sums[1] / total, sums[2] / total)


def write_halos(path: str | Path, halos: Iterable[Halo]) -> None:
    """Write one ``x y z m`` line per halo."""
    with open(path, "w", encoding="ascii") as out:
        for h in halos:
            out.write(f"{h.r[0]:f} {h.r[1]:f} {h.r[2]:f} {h.m:f}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``NAME.txt`` and write its halos to ``NAME.ascii``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: halos name_of_file_to_read\nABORTING", file=sys.stderr)
        return 1
    base = args[0]
    inputfile = f"{base}.txt"
    print(f"reading file: {inputfile}", file=sys.stderr)
    try:
        halos = read_halos(inputfile)
    except OSError:
        print(f"Could not open {inputfile} for mode r\nABORTING", file=sys.stderr)
        return 1
    print(f"  found {len(halos)} halos in file {inputfile}", file=sys.stderr)
    if halos:
        try:
            center_of_mass(halos)
        except ValueError:
            pass
    write_halos(f"{base}.ascii", halos)
    return 0