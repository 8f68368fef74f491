"""Provides the CalculusKit class.

A light wrapper around the finite-difference helpers that exposes a simple
API for scalar derivatives and Jacobian matrices.

Typical usage examples:

>>> import numpy as np
>>> from odekit.calculus_kit import CalculusKit  # noqa: F401
>>>
>>> def rotation_field(x):
...     # vector field: f(x) = (-x1, x0)
...     return np.array([-x[1], x[0]])
>>>
>>> slope = CalculusKit(np.sin, x0=np.array([0.5])).derivative()
>>> jac = CalculusKit(rotation_field, x0=np.array([1.0, 2.0])).jacobian()
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike

from .calculus import build_jacobian
from .finite import derivative
from .utils.constants import DIFF_EPS
from .utils.types import Matrix


class CalculusKit:
    """Provides access to scalar derivatives and Jacobian matrices."""

    def __init__(
        self,
        function: Callable,
        x0: float | ArrayLike,
    ):
        """Initialise with function and evaluation point.

        Args:
            function: Either a scalar function (for ``derivative``) or a
                      vector field R^N -> R^N (for ``jacobian``).
            x0: Point at which to evaluate derivatives; a scalar for
                ``derivative`` and a vector of length N for ``jacobian``.
        """
        self.function = function
        self.x0 = np.asarray(x0, dtype=float)

    def derivative(self, *, stepsize: float = DIFF_EPS) -> float:
        """Returns the forward-difference derivative of a scalar function.

        The evaluation point may be a scalar or a length-1 array.

        Args:
            stepsize: Fixed step ``h``. Default is ``DIFF_EPS``.

        Returns:
            The estimated derivative.

        Raises:
            ValueError: If ``x0`` does not hold exactly one value or
                ``stepsize`` is not positive.
        """
        if self.x0.size != 1:
            raise ValueError(
                f"derivative() expects a scalar evaluation point; got x0 of shape {self.x0.shape}."
            )
        return derivative(self.function, self.x0.item(), stepsize=stepsize)

    def jacobian(self, *, stepsize: float = DIFF_EPS) -> Matrix:
        """Returns the central-difference Jacobian of a vector field."""
        return build_jacobian(self.function, self.x0, stepsize=stepsize)
