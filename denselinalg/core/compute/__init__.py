"""
Shared numeric infrastructure for denselinalg.

IMPORTANT: This is NOT where the factorizations live. Those go in
denselinalg.decomposition. This module contains the constants and
helpers every kernel shares.

Submodules:
    tolerances: Named tolerance constants
    matrix: Identity, permutation and norm helpers
"""

from denselinalg.core.compute.tolerances import (
    ZERO_TOLERANCE,
    JACOBI_TOLERANCE,
    SYMMETRY_TOLERANCE,
    RREF_TOLERANCE,
    VERIFICATION_TOLERANCE,
    JACOBI_SWEEP_FACTOR,
    jacobi_iteration_budget,
)
from denselinalg.core.compute.matrix import (
    frobenius_norm,
    identity,
    permutation_matrix,
    permutation_sign,
)

__all__ = [
    # Tolerances
    "ZERO_TOLERANCE",
    "JACOBI_TOLERANCE",
    "SYMMETRY_TOLERANCE",
    "RREF_TOLERANCE",
    "VERIFICATION_TOLERANCE",
    "JACOBI_SWEEP_FACTOR",
    "jacobi_iteration_budget",
    # Matrix helpers
    "frobenius_norm",
    "identity",
    "permutation_matrix",
    "permutation_sign",
]
