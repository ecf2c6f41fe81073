"""
Singular value decomposition A = U diag(S) V^T via the eigendecomposition
of A^T A.

Forming A^T A squares the condition number, so small singular values lose
about twice as many digits as a bidiagonalization-based SVD would. That
trade is accepted for textbook-sized matrices.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from denselinalg.core.compute.matrix import freeze
from denselinalg.core.compute.tolerances import (
    JACOBI_TOLERANCE,
    ZERO_TOLERANCE,
    jacobi_iteration_budget,
)
from denselinalg.core.validation import check_matrix
from denselinalg.decomposition._jacobi import jacobi_eigen


@dataclass(frozen=True)
class SVDResult:
    """
    Result of singular value decomposition.

    Attributes:
        U: Left singular vectors for the nonzero singular values (m x r)
        S: Singular values above the rank threshold, descending (r,)
        V: Right singular vectors, eigenvectors of A^T A (n x n)
    """
    U: NDArray[np.floating[Any]]
    S: NDArray[np.floating[Any]]
    V: NDArray[np.floating[Any]]

    def __post_init__(self) -> None:
        freeze(self.U)
        freeze(self.S)
        freeze(self.V)

    @property
    def rank(self) -> int:
        """Numerical rank r."""
        return len(self.S)


def svd(
    A: ArrayLike,
    *,
    tol: float = ZERO_TOLERANCE,
    max_iterations: int | None = None,
    strict: bool = False,
) -> SVDResult:
    """
    Singular value decomposition of an m x n matrix.

    Algorithm:
        1. Eigendecompose A^T A (symmetric positive semidefinite)
        2. S[j] = sqrt(max(lambda_j, 0)); the clamp absorbs small negative
           eigenvalues produced by rounding
        3. r = number of S[j] above tol
        4. U[:, j] = A V[:, j] / S[j] for j < r

    Args:
        A: Matrix to decompose (m x n)
        tol: Rank threshold on the singular values
        max_iterations: Jacobi rotation budget; defaults to 200 * n**2
        strict: Raise ConvergenceError instead of warning when the Jacobi
            budget runs out

    Returns:
        SVDResult with U (m x r), S (r,) and V (n x n)

    Raises:
        ValidationError: If A is empty, non-numeric or non-finite
        DimensionError: If A is not 2D
        ConvergenceError: If strict and the iteration does not converge
    """
    M = check_matrix(A, 'A')
    n = M.shape[1]
    if max_iterations is None:
        max_iterations = jacobi_iteration_budget(n)

    eig = jacobi_eigen(
        M.T @ M,
        tol=JACOBI_TOLERANCE,
        max_iterations=max_iterations,
        strict=strict,
    )
    V = eig.vectors
    singular_values = np.sqrt(np.maximum(eig.values, 0.0))

    r = int(np.count_nonzero(singular_values > tol))
    S = singular_values[:r].copy()
    U = (M @ V[:, :r]) / S

    return SVDResult(U=U, S=S, V=V)


def svd_reconstruct(svd_result: SVDResult) -> NDArray[np.floating[Any]]:
    """Reconstruct A as U diag(S) V[:, :r]^T."""
    r = svd_result.rank
    return (svd_result.U * svd_result.S) @ svd_result.V[:, :r].T
