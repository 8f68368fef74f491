"""Pytest configuration file with shared fixtures."""

import os

import numpy as np
import pytest

__all__ = ["rng"]


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")
    os.environ.setdefault("VECLIB_MAXIMUM_THREADS", "1")


@pytest.fixture
def rng():
    """Random number generator with fixed seed (42) for reproducibility."""
    return np.random.default_rng(seed=42)
