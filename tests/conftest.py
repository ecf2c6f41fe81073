"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_matrix(rng):
    """Random 5x5 matrix, invertible with probability one."""
    return rng.standard_normal((5, 5))


@pytest.fixture
def tall_matrix(rng):
    """Random 7x4 matrix with full column rank."""
    return rng.standard_normal((7, 4))


@pytest.fixture
def symmetric_matrix(rng):
    """Random 6x6 symmetric matrix (exactly symmetric)."""
    B = rng.standard_normal((6, 6))
    return (B + B.T) / 2.0


@pytest.fixture
def spd_matrix(rng):
    """Random 5x5 symmetric positive definite matrix."""
    B = rng.standard_normal((5, 5))
    return B @ B.T + 5.0 * np.eye(5)


@pytest.fixture
def rank_deficient_matrix(rng):
    """6x4 matrix whose last column is the sum of the first two."""
    B = rng.standard_normal((6, 3))
    return np.column_stack([B, B[:, 0] + B[:, 1]])
