"""Helpers that turn ODE right-hand sides into plain vector fields."""

from __future__ import annotations

from odekit.utils.types import ODERightSideFunction, Vector, VectorFunction

__all__ = [
    "get_frozen_time_function",
]


def get_frozen_time_function(
    rhs: ODERightSideFunction,
    t: float,
) -> VectorFunction:
    """Returns the state-only view ``x -> rhs(t, x)`` of an ODE right-hand side.

    Implicit integrators linearize the right-hand side in the state at a fixed
    time point; this binds that time so the result can be handed to
    :func:`odekit.calculus.jacobian.build_jacobian`.

    Args:
        rhs: Right-hand side ``f(t, x)`` of the system ``x' = f(t, x)``.
        t: Time at which the right-hand side is frozen.

    Returns:
        A function of the state vector only.

    Raises:
        TypeError: If ``rhs`` is not callable.
    """
    if not callable(rhs):
        raise TypeError(f"rhs must be callable; got {type(rhs).__name__}.")
    t_fixed = float(t)

    def frozen_function(x: Vector):
        return rhs(t_fixed, x)

    return frozen_function
