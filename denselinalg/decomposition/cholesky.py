"""
Cholesky factorization A = L L^T for symmetric positive definite A.

Symmetry is not verified: only the lower triangle of A is read. Callers
that cannot vouch for symmetry should validate first, for example with
check_symmetric or is_positive_definite.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from denselinalg.core.compute.matrix import freeze
from denselinalg.core.compute.tolerances import ZERO_TOLERANCE
from denselinalg.core.exceptions import NotPositiveDefiniteError
from denselinalg.core.validation import check_matrix, check_rhs, check_square
from denselinalg.decomposition._triangular import back_substitution, forward_substitution


@dataclass(frozen=True)
class CholeskyResult:
    """
    Result of Cholesky factorization.

    Attributes:
        L: Lower triangular matrix with strictly positive diagonal (n x n)
    """
    L: NDArray[np.floating[Any]]

    def __post_init__(self) -> None:
        freeze(self.L)

    @property
    def n(self) -> int:
        return self.L.shape[0]


def cholesky(A: ArrayLike, *, tol: float = ZERO_TOLERANCE) -> CholeskyResult:
    """
    Cholesky factorization, row by row.

        L[i, j] = (A[i, j] - sum_{k<j} L[i, k] L[j, k]) / L[j, j]    (i > j)
        L[i, i] = sqrt(A[i, i] - sum_{k<i} L[i, k]^2)

    Args:
        A: Symmetric positive definite matrix (n x n)
        tol: Divisors L[j, j] below tol are treated as zero

    Returns:
        CholeskyResult with the lower triangular factor

    Raises:
        ValidationError: If A is empty, non-numeric or non-finite
        DimensionError: If A is not square
        NotPositiveDefiniteError: If a diagonal radicand is <= 0 or a
            divisor is below tol
    """
    M = check_matrix(A, 'A')
    check_square(M, 'A')
    n = M.shape[0]
    L = np.zeros((n, n), dtype=np.float64)

    for i in range(n):
        for j in range(i):
            if abs(L[j, j]) < tol:
                raise NotPositiveDefiniteError(
                    f"Matrix is not positive definite: L[{j}, {j}] = {L[j, j]:.3e} "
                    f"is below tolerance {tol:.1e}",
                    matrix_name='A',
                    leading_minor=j,
                )
            L[i, j] = (M[i, j] - L[i, :j] @ L[j, :j]) / L[j, j]

        radicand = M[i, i] - L[i, :i] @ L[i, :i]
        if radicand <= 0:
            raise NotPositiveDefiniteError(
                f"Matrix is not positive definite: leading minor {i + 1} gives "
                f"non-positive pivot {radicand:.6g}",
                matrix_name='A',
                leading_minor=i,
            )
        L[i, i] = np.sqrt(radicand)

    return CholeskyResult(L=L)


def solve_cholesky(
    chol: CholeskyResult,
    b: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b from a Cholesky factorization of A.

    Forward-substitutes L y = b, then back-substitutes L^T x = y.

    Args:
        chol: Factorization of A
        b: Right-hand side, shape (n,) or (n, k)

    Returns:
        Solution x with the same shape as b

    Raises:
        DimensionError: If b's leading dimension is not n
    """
    rhs = check_rhs(b, chol.n, 'b')
    y = forward_substitution(chol.L, rhs)
    return back_substitution(chol.L.T, y)
