"""Finite-difference primitives."""

from .core import derivative

__all__ = ["derivative"]
