"""Numerical routines and worked exercises for computational astrophysics."""

__version__ = "0.1.0"