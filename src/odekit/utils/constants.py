"""Numerical constants shared by the odekit routines."""

import numpy as np

#: Fixed finite-difference step, roughly sqrt of double machine epsilon.
DIFF_EPS = 2e-8
DIFF_INVERSE_EPS = 1.0 / DIFF_EPS

#: Absolute tolerance below which a value counts as zero.
ZERO_TOLERANCE = 1e-16

INF = np.inf
PI = np.pi

__all__ = [
    "DIFF_EPS",
    "DIFF_INVERSE_EPS",
    "ZERO_TOLERANCE",
    "INF",
    "PI",
]
