"""
Spectral decomposition A = Q diag(eigenvalues) Q^T of a symmetric matrix.

Eigenvalues come back in descending order with Q's columns matching; PCA
and SVD both rely on that ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from denselinalg.core.compute.matrix import freeze
from denselinalg.core.compute.tolerances import (
    JACOBI_TOLERANCE,
    SYMMETRY_TOLERANCE,
    jacobi_iteration_budget,
)
from denselinalg.core.validation import check_matrix, check_square, check_symmetric
from denselinalg.decomposition._jacobi import jacobi_eigen


@dataclass(frozen=True)
class SpectralResult:
    """
    Result of symmetric eigendecomposition.

    Attributes:
        Q: Orthogonal matrix, eigenvectors as columns (n x n)
        eigenvalues: Eigenvalues in descending order (n,)
        iterations: Number of Jacobi rotations applied
        converged: Whether the off-diagonal threshold was reached
    """
    Q: NDArray[np.floating[Any]]
    eigenvalues: NDArray[np.floating[Any]]
    iterations: int = 0
    converged: bool = True

    def __post_init__(self) -> None:
        freeze(self.Q)
        freeze(self.eigenvalues)


def spectral_decomposition(
    A: ArrayLike,
    *,
    symmetry_tol: float = SYMMETRY_TOLERANCE,
    tol: float = JACOBI_TOLERANCE,
    max_iterations: int | None = None,
    strict: bool = False,
) -> SpectralResult:
    """
    Eigendecomposition of a symmetric matrix by the Jacobi method.

    Args:
        A: Symmetric matrix (n x n)
        symmetry_tol: Largest accepted |A[i, j] - A[j, i]|
        tol: Jacobi convergence threshold on the largest off-diagonal entry
        max_iterations: Rotation budget; defaults to 200 * n**2
        strict: Raise ConvergenceError instead of warning when the budget
            runs out

    Returns:
        SpectralResult with eigenvectors and descending eigenvalues

    Raises:
        ValidationError: If A is empty, non-numeric or non-finite
        DimensionError: If A is not square
        NotSymmetricError: If A is not symmetric within symmetry_tol
        ConvergenceError: If strict and the iteration does not converge
    """
    M = check_matrix(A, 'A')
    check_square(M, 'A')
    check_symmetric(M, symmetry_tol, 'A')

    if max_iterations is None:
        max_iterations = jacobi_iteration_budget(M.shape[0])

    eig = jacobi_eigen(M, tol=tol, max_iterations=max_iterations, strict=strict)
    return SpectralResult(
        Q=eig.vectors,
        eigenvalues=eig.values,
        iterations=eig.iterations,
        converged=eig.converged,
    )
