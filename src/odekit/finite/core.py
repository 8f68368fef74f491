"""Forward finite-difference derivative of a scalar function with a fixed step."""

from __future__ import annotations

from odekit.utils.constants import DIFF_EPS, DIFF_INVERSE_EPS
from odekit.utils.types import ScalarFunction
from odekit.utils.validate import validate_stepsize

__all__ = [
    "derivative",
    "inverse_stepsize",
]


def inverse_stepsize(stepsize: float) -> float:
    """Returns ``1 / stepsize``, using the precomputed constant for the default step."""
    if stepsize == DIFF_EPS:
        return DIFF_INVERSE_EPS
    return 1.0 / validate_stepsize(stepsize)


def derivative(
    function: ScalarFunction,
    x: float,
    stepsize: float = DIFF_EPS,
) -> float:
    """Returns the forward-difference estimate of ``f'(x)``.

    Computes ``(f(x + h) - f(x)) / h``, which is first-order accurate in ``h``.
    The default step ``h = 2e-8`` is close to the square root of double
    machine epsilon, which balances truncation against cancellation error for
    a forward difference.

    No checks are made on ``x`` or on the function values: exceptions raised
    by ``function`` propagate unchanged and non-finite values are returned
    as they are.

    Args:
        function: Scalar function to differentiate.
        x: Point at which the derivative is evaluated.
        stepsize: Fixed step ``h``. Default is ``DIFF_EPS``.

    Returns:
        The estimated derivative.

    Raises:
        ValueError: If ``stepsize`` is not positive and finite.
    """
    inv_h = inverse_stepsize(stepsize)
    return (function(x + stepsize) - function(x)) * inv_h
