[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astrolab"
version = "0.1.0"
description = "Small numerical toolkit for computational astrophysics: random deviates, sorting, interpolation, integration, orbits, Mandelbrot sets, 1D gravity, halo catalogues and merger trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "astrophysics",
    "numerical methods",
    "runge-kutta",
    "leapfrog",
    "spline",
    "random numbers",
    "mandelbrot",
    "merger tree",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
astrolab-orbit = "astrolab.orbit:main"
astrolab-mandelbrot = "astrolab.mandelbrot:main"
astrolab-gravity = "astrolab.gravity:main"
astrolab-halos = "astrolab.halos:main"
astrolab-mtree = "astrolab.mtree:main"

[tool.hatch.build.targets.wheel]
packages = ["astrolab"]

[tool.hatch.build.targets.sdist]
include = ["astrolab", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
