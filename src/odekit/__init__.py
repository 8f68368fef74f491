"""Provides the odekit numerical primitives."""

from importlib.metadata import PackageNotFoundError, version

from odekit.calculus import build_jacobian, build_rhs_jacobian
from odekit.calculus_kit import CalculusKit
from odekit.finite import derivative
from odekit.utils.constants import DIFF_EPS
from odekit.utils.numerics import cube, is_zero, middle, sign, sqr

try:
    __version__ = version("odekit")
except PackageNotFoundError:
    pass

__all__ = [
    "CalculusKit",
    "DIFF_EPS",
    "build_jacobian",
    "build_rhs_jacobian",
    "cube",
    "derivative",
    "is_zero",
    "middle",
    "sign",
    "sqr",
]
