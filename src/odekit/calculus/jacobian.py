"""Contains functions used to construct the Jacobian matrix."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from odekit.finite.core import inverse_stepsize
from odekit.logger import odekit_logger
from odekit.utils.constants import DIFF_EPS
from odekit.utils.sandbox import get_frozen_time_function
from odekit.utils.types import Matrix, ODERightSideFunction, Vector, VectorFunction
from odekit.utils.validate import as_1d_float_array, check_vector_output

__all__ = [
    "build_jacobian",
    "build_rhs_jacobian",
]


def build_jacobian(
    function: VectorFunction,
    x0: ArrayLike,
    stepsize: float = DIFF_EPS,
) -> Matrix:
    """Computes the Jacobian of a vector field with central differences.

    Column ``j`` is ``(F(X + h/2 e_j) - F(X - h/2 e_j)) / h``, which is
    second-order accurate in ``h``. Columns are built one at a time from a
    single perturbation vector that holds ``h`` in entry ``j`` during
    iteration ``j`` and zeros everywhere else, so the function is evaluated
    exactly ``2 N`` times.

    Non-finite values are not treated as errors: they end up in the returned
    matrix and a warning is logged.

    Args:
        function: Vector field ``F: R^N -> R^N``. It receives a fresh
            array at every call and must return a 1D vector of length N.
        x0: The point at which the Jacobian is evaluated. Lists and row
            vectors are accepted; the input is never modified.
        stepsize: Fixed step ``h``. Default is ``DIFF_EPS``.

    Returns:
        An (N, N) array. Each column corresponds to the derivative with
            respect to one coordinate.

    Raises:
        ValueError: If ``x0`` is empty or ``stepsize`` is not positive.
        TypeError: If ``function`` does not return a vector of length N.
    """
    x = as_1d_float_array(x0, name="x0")
    if x.size == 0:
        raise ValueError("x0 must be a non-empty 1D array.")
    inv_h = inverse_stepsize(stepsize)

    n = int(x.size)
    jac = np.zeros((n, n), dtype=float)
    dx = np.zeros(n, dtype=float)

    for j in range(n):
        dx[j] += stepsize
        column = _column_derivative(function, x, dx, inv_h, index=j)
        dx[j] = 0.0

        jac[:, j] = column

    odekit_logger.debug(
        "build_jacobian: N=%d, %d function evaluations, stepsize=%g.", n, 2 * n, stepsize
    )
    if not np.isfinite(jac).all():
        odekit_logger.warning(
            "build_jacobian: non-finite entries in Jacobian at x0=%s.", x
        )
    return jac


def build_rhs_jacobian(
    rhs: ODERightSideFunction,
    t: float,
    x0: ArrayLike,
    stepsize: float = DIFF_EPS,
) -> Matrix:
    """Computes the state Jacobian of an ODE right-hand side at a fixed time.

    This is ``build_jacobian`` applied to ``x -> rhs(t, x)``, i.e. the matrix
    an implicit integrator needs for a Newton step at time ``t``.

    Args:
        rhs: Right-hand side ``f(t, x)`` of the system ``x' = f(t, x)``.
        t: Time at which the Jacobian is evaluated.
        x0: State at which the Jacobian is evaluated.
        stepsize: Fixed step ``h``. Default is ``DIFF_EPS``.

    Returns:
        An (N, N) array with entries ``d f_i / d x_j`` at ``(t, x0)``.

    Raises:
        ValueError: If ``x0`` is empty or ``stepsize`` is not positive.
        TypeError: If ``rhs`` is not callable or does not return a vector
            of length N.
    """
    return build_jacobian(get_frozen_time_function(rhs, t), x0, stepsize=stepsize)


def _column_derivative(
    function: VectorFunction,
    x: Vector,
    dx: Vector,
    inv_h: float,
    *,
    index: int,
) -> Vector:
    """Central-difference derivative of ``function`` along ``dx``.

    Args:
        function: The vector field to be differentiated.
        x: The point at which the Jacobian is evaluated.
        dx: Perturbation vector, nonzero only at ``index``.
        inv_h: Inverse of the step stored in ``dx``.
        index: Coordinate being perturbed.

    Returns:
        A 1D array representing the derivative with respect to coordinate ``index``.

    Raises:
        TypeError: If the function output is not a vector of length ``x.size``.
    """
    half = 0.5 * dx
    f_plus = check_vector_output(function(x + half), x.size, index=index)
    f_minus = check_vector_output(function(x - half), x.size, index=index)
    return (f_plus - f_minus) * inv_h
