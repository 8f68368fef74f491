"""Calculus utilities.

Provides constructors for finite-difference Jacobian matrices.
"""

from .jacobian import build_jacobian, build_rhs_jacobian

__all__ = ["build_jacobian", "build_rhs_jacobian"]
