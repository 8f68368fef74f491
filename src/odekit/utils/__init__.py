"""Utility functions for odekit package."""

from .numerics import (
    cube,
    is_zero,
    middle,
    sign,
    sqr,
)

__all__ = [
    "is_zero",
    "sign",
    "sqr",
    "cube",
    "middle",
]
