"""
Named tolerances for the factorization kernels.

Thresholds are absolute and never derived from input magnitude. Callers
working with very large or very small entries should rescale before calling.
Each public routine accepts a keyword override for the tolerance it uses.
"""

# Numeric zero: LU pivots, QR column norms, Cholesky divisors, SVD rank
ZERO_TOLERANCE = 1e-12

# Largest off-diagonal magnitude accepted as converged by the Jacobi iteration
JACOBI_TOLERANCE = 1e-14

# Largest |A[i, j] - A[j, i]| accepted by spectral decomposition
SYMMETRY_TOLERANCE = 1e-12

# Pivot/zero threshold of the reduced row echelon solver
RREF_TOLERANCE = 1e-10

# Relative reconstruction error accepted by derived checks
VERIFICATION_TOLERANCE = 1e-8

# Jacobi rotation budget is JACOBI_SWEEP_FACTOR * n**2
JACOBI_SWEEP_FACTOR = 200


def jacobi_iteration_budget(n: int) -> int:
    """Default Jacobi rotation budget for an n x n matrix."""
    return JACOBI_SWEEP_FACTOR * n * n
