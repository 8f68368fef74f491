"""Shared typing aliases for odekit."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import numpy as np
from numpy.typing import ArrayLike, NDArray

Vector: TypeAlias = NDArray[np.float64]
Matrix: TypeAlias = NDArray[np.float64]

ScalarFunction: TypeAlias = Callable[[float], float]
VectorFunction: TypeAlias = Callable[[Vector], ArrayLike]
ODERightSideFunction: TypeAlias = Callable[[float, Vector], ArrayLike]
