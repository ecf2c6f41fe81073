"""
LU factorization with partial pivoting and the operations derived from it.

Computes P A = L U where P is a permutation matrix, L is unit lower
triangular and U is upper triangular. Determinant, inverse and linear
solve all consume the resulting LUResult.

A column whose best available pivot is below the zero tolerance is
skipped rather than eliminated: its multipliers stay 0 and U keeps a
(near-)zero diagonal entry. Complete pivoting is not attempted, so callers
must inspect U's diagonal (or use determinant/inverse, which do) before
relying on the factorization of a singular matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from denselinalg.core.compute.matrix import (
    freeze,
    identity,
    permutation_matrix,
    permutation_sign,
)
from denselinalg.core.compute.tolerances import ZERO_TOLERANCE
from denselinalg.core.exceptions import SingularMatrixError
from denselinalg.core.validation import check_matrix, check_rhs, check_square
from denselinalg.decomposition._triangular import back_substitution, forward_substitution


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU factorization with partial pivoting.

    Attributes:
        P: Permutation matrix (n x n), P @ A == L @ U
        L: Unit lower triangular matrix (n x n), multipliers below the diagonal
        U: Upper triangular matrix (n x n)
        pivot: Row order, pivot[k] is the original row placed at position k
        tol: Zero tolerance the factorization was computed with
    """
    P: NDArray[np.floating[Any]]
    L: NDArray[np.floating[Any]]
    U: NDArray[np.floating[Any]]
    pivot: NDArray[np.intp]
    tol: float = ZERO_TOLERANCE

    def __post_init__(self) -> None:
        for arr in (self.P, self.L, self.U, self.pivot):
            freeze(arr)

    @property
    def n(self) -> int:
        """Order of the factored matrix."""
        return self.U.shape[0]

    @property
    def zero_pivots(self) -> NDArray[np.intp]:
        """Indices k where |U[k, k]| is below tol."""
        return np.flatnonzero(np.abs(np.diag(self.U)) < self.tol)

    @property
    def is_singular(self) -> bool:
        return self.zero_pivots.size > 0


def lu(A: ArrayLike, *, tol: float = ZERO_TOLERANCE) -> LUResult:
    """
    LU factorization with partial pivoting.

    For each column k the row among k..n-1 with the largest |A[i, k]| is
    swapped into position k (ties keep the earliest row), then entries
    below the pivot are eliminated and their multipliers stored in L.

    Args:
        A: Square matrix to factor (n x n)
        tol: Pivots with magnitude below tol are treated as zero and the
            column is left uneliminated

    Returns:
        LUResult with P, L, U and the pivot array

    Raises:
        ValidationError: If A is empty, non-numeric or non-finite
        DimensionError: If A is not a square 2D matrix
    """
    M = check_matrix(A, 'A')
    check_square(M, 'A')
    return _lu_factor(M, tol)


def _lu_factor(M: NDArray[np.floating[Any]], tol: float) -> LUResult:
    """Gaussian elimination in place on the working copy M."""
    n = M.shape[0]
    L = np.zeros((n, n), dtype=np.float64)
    pivot = np.arange(n, dtype=np.intp)

    for k in range(n):
        p = k + int(np.argmax(np.abs(M[k:, k])))
        if abs(M[p, k]) < tol:
            continue

        if p != k:
            M[[k, p]] = M[[p, k]]
            L[[k, p], :k] = L[[p, k], :k]
            pivot[[k, p]] = pivot[[p, k]]

        L[k + 1:, k] = M[k + 1:, k] / M[k, k]
        M[k + 1:, k + 1:] -= np.outer(L[k + 1:, k], M[k, k + 1:])

    np.fill_diagonal(L, 1.0)
    U = np.triu(M)

    return LUResult(P=permutation_matrix(pivot), L=L, U=U, pivot=pivot, tol=tol)


def _as_lu(A: ArrayLike | LUResult) -> LUResult:
    if isinstance(A, LUResult):
        return A
    return lu(A)


def determinant(A: ArrayLike | LUResult) -> float:
    """
    Determinant from the LU factorization.

    det(A) = sign(P) * prod(diag(U)), where sign(P) is (-1) raised to the
    number of inversions in the pivot array. A singular matrix is an
    expected outcome, not an error: any |U[k, k]| below tol gives 0.0.

    Args:
        A: Square matrix, or an existing LUResult

    Returns:
        The determinant, or 0.0 for a numerically singular matrix

    Raises:
        DimensionError: If A is not square
    """
    result = _as_lu(A)
    if result.is_singular:
        return 0.0
    diag = np.diag(result.U)
    return float(permutation_sign(result.pivot) * np.prod(diag))


def inverse(A: ArrayLike | LUResult) -> NDArray[np.floating[Any]] | None:
    """
    Inverse via LU: solve L U x_j = P e_j for every standard basis vector.

    Args:
        A: Square matrix, or an existing LUResult

    Returns:
        The inverse (n x n), or None if any pivot is below tol

    Raises:
        DimensionError: If A is not square
    """
    result = _as_lu(A)
    if result.is_singular:
        return None

    basis = identity(result.n)
    columns = [solve_lu(result, basis[:, j]) for j in range(result.n)]
    return np.column_stack(columns)


def solve_lu(
    lu_result: LUResult,
    b: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b from an LU factorization of A.

    Permutes b by P, forward-substitutes through L, then back-substitutes
    through U.

    Args:
        lu_result: Factorization of A
        b: Right-hand side, shape (n,) or (n, k)

    Returns:
        Solution x with the same shape as b

    Raises:
        DimensionError: If b's leading dimension is not n
        SingularMatrixError: If a pivot of U is below tol
    """
    n = lu_result.n
    rhs = check_rhs(b, n, 'b')

    zero_pivots = lu_result.zero_pivots
    if zero_pivots.size > 0:
        raise SingularMatrixError(
            f"Matrix is singular: pivot U[{zero_pivots[0]}, {zero_pivots[0]}] "
            f"is below tolerance {lu_result.tol:.1e}; no unique solution exists.",
            matrix_name='U',
            condition_number=float('inf'),
            rank=n - int(zero_pivots.size),
            expected_rank=n,
            pivot_index=int(zero_pivots[0]),
        )

    Pb = lu_result.P @ rhs
    y = forward_substitution(lu_result.L, Pb, unit_diagonal=True)
    return back_substitution(lu_result.U, y)
