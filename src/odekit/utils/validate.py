"""Validation utilities for odekit inputs and function outputs."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "as_1d_float_array",
    "validate_stepsize",
    "check_vector_output",
]


def as_1d_float_array(x: ArrayLike, *, name: str = "x") -> NDArray[np.float64]:
    """Convert input to a 1D float array.

    Row and column vectors are flattened; anything with more than one
    non-singleton axis is rejected. A copy is always returned so callers
    may modify the result without touching the original.

    Args:
        x: Input array-like.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        ValueError: If the input is not vector-shaped.
    """
    arr = np.array(x, dtype=np.float64)
    if arr.ndim > 1 and sum(d > 1 for d in arr.shape) > 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    return arr.ravel()


def validate_stepsize(stepsize: float) -> float:
    """Checks that a finite-difference step is a positive finite number.

    Args:
        stepsize: Step size ``h``.

    Returns:
        The step size as a float.

    Raises:
        ValueError: If ``stepsize`` is not positive and finite.
    """
    h = float(stepsize)
    if not np.isfinite(h) or h <= 0:
        raise ValueError(f"stepsize must be positive and finite; got {stepsize!r}.")
    return h


def check_vector_output(value: ArrayLike, expected_size: int, *, index: int) -> NDArray[np.float64]:
    """Checks that a vector field returned a 1D vector of the expected length.

    Args:
        value: Output of the vector field.
        expected_size: Required vector length (the state dimension).
        index: Coordinate being perturbed when ``value`` was produced.

    Returns:
        The output as a 1D float array.

    Raises:
        TypeError: If the output is not a 1D vector of ``expected_size``.
    """
    out = np.asarray(value, dtype=float)
    if out.ndim != 1 or out.size != expected_size:
        raise TypeError(
            f"build_jacobian expects f: R^{expected_size} -> R^{expected_size}; "
            f"got output of shape {out.shape} for coordinate index {index}."
        )
    return out
