"""Elementary scalar helpers used across the ODE solvers."""

from __future__ import annotations

from odekit.utils.constants import ZERO_TOLERANCE

__all__ = [
    "is_zero",
    "sign",
    "sqr",
    "cube",
    "middle",
]


def is_zero(value: float) -> bool:
    """Returns True if ``abs(value)`` is below the zero tolerance (``1e-16``)."""
    return abs(value) < ZERO_TOLERANCE


def sign(value: float) -> int:
    """Returns the signum of ``value``.

    Args:
        value: Real number.

    Returns:
        ``-1`` for negative values, ``1`` for positive values and ``0``
        otherwise (including zero and NaN).
    """
    return int(value > 0) - int(value < 0)


def sqr(value: float) -> float:
    """Returns ``value**2``."""
    return value * value


def cube(value: float) -> float:
    """Returns ``value**3``."""
    return value * value * value


def middle(a: float, b: float) -> float:
    """Returns the midpoint of the interval spanned by ``a`` and ``b``."""
    return 0.5 * (a + b)
