"""
Core infrastructure for denselinalg.

This module provides shared abstractions and utilities used by the
factorization kernels (decomposition) and the linear-system solvers
(systems).

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances and matrix helpers
"""

from denselinalg.core.exceptions import (
    DenseLinalgError,
    ValidationError,
    DimensionError,
    NotSymmetricError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceError,
)

__all__ = [
    "DenseLinalgError",
    "ValidationError",
    "DimensionError",
    "NotSymmetricError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
]
