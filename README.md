# astrolab

A small, dependency-free toolkit of numerical routines and worked exercises
for computational astrophysics, written in plain Python.

## What is inside

| Module                   | Purpose                                                                 |
|--------------------------|-------------------------------------------------------------------------|
| `astrolab.random`        | Reproducible uniform (`Ran3`, `Ran1`) and Gaussian (`GaussianDeviate`) generators |
| `astrolab.sorting`       | Index sorting (`indexx`) and table bisection (`locate`)                 |
| `astrolab.binary_io`     | Reading fixed-size, optionally byte-swapped values from binary streams (`read_int`, `read_double`, ...) |
| `astrolab.interpolation` | `polint`, `spline`/`splint`, `smooth3`, `find_max`, `find_max_spline`   |
| `astrolab.integrate`     | Adaptive fifth-order Runge–Kutta quadrature (`integrate`)               |
| `astrolab.orbit`         | Earth–Sun orbit with `leapfrog_step` and `rungekutta4_step`             |
| `astrolab.mandelbrot`    | Divergence counts of the Mandelbrot series on a grid                    |
| `astrolab.gravity`       | One-dimensional N-body gravity with Euler integration                   |
| `astrolab.halos`         | Reading and writing halo catalogues, `center_of_mass`                   |
| `astrolab.mtree`         | Reading merger trees, halo lookup (`MergerTree.find`) and `MergerTree.main_branch` |
| `astrolab.series`        | `pi_series`, one-percent growth (`calculation`) and `doubling_sequence` |

Errors from the numerical routines (for example coincident abscissae in
`polint` or `splint`) are raised as `astrolab.errors.NumericalError`.
Reading past the end of a binary stream raises `EOFError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from astrolab.random import Ran3
from astrolab.sorting import indexx
from astrolab.integrate import integrate
from astrolab.mandelbrot import mandelbrot_series
from astrolab.series import pi_series

rng = Ran3(-123456)
values = [rng.random() for _ in range(10)]
order = indexx(values)               # indices that put values in ascending order

area = integrate(lambda x: x * x, 0.0, 1.0, 0.01, 1e-8)   # close to 1/3

iterations = mandelbrot_series(-0.5, 0.0)   # points inside the set reach the iteration limit

approx_pi = pi_series(1000)
```

Orbits can be integrated with either stepping method, `"leapfrog"` or `"rk4"`:

```python
from astrolab.orbit import integrate_orbit, write_orbit

states = integrate_orbit(1000, "leapfrog")
write_orbit(states, "lfrog.dat")
```

## Commands

Installing the package provides these commands:

- `astrolab-orbit NSTEPS` — integrates the Earth's orbit around the Sun over
  five years with both leapfrog and fourth-order Runge–Kutta, prints the time
  each took and writes the trajectories to `lfrog.dat` and `rk4.dat`.
- `astrolab-mandelbrot N_REAL N_IMG NTHREADS` — evaluates the Mandelbrot
  series on an `N_REAL` × `N_IMG` grid and writes `mandelbrot.dat`, one
  `c_real c_img count` line per point.
- `astrolab-gravity` — runs the one-dimensional gravity simulation (13
  particles, 250 steps) and writes the initial and final positions to
  `posI.txt` and `posF.txt`. It takes no arguments.
- `astrolab-halos NAME` — reads the halo catalogue `NAME.txt` (lines of
  `x y z m`, `#` lines skipped) and writes the halos back out to `NAME.ascii`.
- `astrolab-mtree FILE HALOID` — reads a merger tree file, looks up a halo id,
  and prints its progenitors and main progenitor branch.

The commands that take arguments print a usage line when given the wrong
number of them.

## What the package does not do

- All computation runs in a single thread. The thread count given to
  `astrolab-mandelbrot` is only reported, not used.
- `astrolab-halos` computes the centre of mass but does not print it; call
  `astrolab.halos.center_of_mass` to get it.
- There is no plotting; the commands only write plain-text data files.