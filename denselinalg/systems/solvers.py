"""
General linear systems and one-sided inverses.

solve_general() handles any m x n system, whether it has no solution, a
unique solution or infinitely many. The inverse helpers build on the
LU-based inverse() from denselinalg.decomposition.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from denselinalg.core.compute.tolerances import RREF_TOLERANCE
from denselinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_matrix,
)
from denselinalg.decomposition.diagnostics import identity_error
from denselinalg.decomposition.lu import determinant, inverse
from denselinalg.systems.solution import (
    InvertibilityKind,
    InvertibilityReport,
    LinearSystemSolution,
)


def solve_general(
    A: ArrayLike,
    b: ArrayLike,
    *,
    tol: float = RREF_TOLERANCE,
) -> LinearSystemSolution:
    """
    Solve A x = b by reduced row echelon form of the augmented matrix [A | b].

    Uses partial pivoting; entries with magnitude below tol count as zero.
    The outcome is classified as:
        - 'none': some row reduces to [0 ... 0 | c] with c != 0, or the
          system is empty or b has the wrong length
        - 'unique': every column of A has a pivot
        - 'infinite': free variables remain; the particular solution sets
          them to 0 and basis spans the null space of A

    Args:
        A: Coefficient matrix (m x n)
        b: Right-hand side (m,)
        tol: Zero threshold for pivots and eliminated entries

    Returns:
        LinearSystemSolution describing the solution set

    Raises:
        ValidationError: If A or b is non-numeric or non-finite
        DimensionError: If A is not 2D or b is not 1D
    """
    A_arr = check_array(A, 'A')
    if A_arr.size == 0:
        return LinearSystemSolution(kind='none', message='Empty matrix.')
    check_2d(A_arr, 'A')
    check_finite(A_arr, 'A')

    b_arr = check_array(b, 'b')
    check_1d(b_arr, 'b')
    check_finite(b_arr, 'b')

    m, n = A_arr.shape
    if b_arr.shape[0] != m:
        return LinearSystemSolution(
            kind='none',
            message=f'Length of b ({b_arr.shape[0]}) must equal number of rows ({m}).',
        )

    M, pivot_list = _rref(np.column_stack([A_arr, b_arr]), n, tol)
    pivot_cols = np.asarray(pivot_list, dtype=np.intp)

    # A row [0 ... 0 | c] with c != 0 is inconsistent
    zero_rows = np.all(np.abs(M[:, :n]) <= tol, axis=1)
    if np.any(zero_rows & (np.abs(M[:, n]) > tol)):
        return LinearSystemSolution(
            kind='none',
            message='No solution (inconsistent system).',
        )

    x = np.zeros(n, dtype=np.float64)
    x[pivot_cols] = M[:len(pivot_cols), n]
    residual = float(np.linalg.norm(A_arr @ x - b_arr))

    pivot_set = set(pivot_list)
    free_indices = tuple(j for j in range(n) if j not in pivot_set)
    if not free_indices:
        return LinearSystemSolution(kind='unique', x=x, residual=residual)

    basis = np.zeros((len(free_indices), n), dtype=np.float64)
    for i, free_col in enumerate(free_indices):
        basis[i, free_col] = 1.0
        basis[i, pivot_cols] = -M[:len(pivot_cols), free_col]

    return LinearSystemSolution(
        kind='infinite',
        x=x,
        free_indices=free_indices,
        basis=basis,
        residual=residual,
    )


def _rref(
    M: NDArray[np.floating[Any]],
    n_cols: int,
    tol: float,
) -> tuple[NDArray[np.floating[Any]], list[int]]:
    """
    Reduce the augmented matrix M in place; only the first n_cols columns
    are eligible as pivot columns.

    Returns M and the pivot column of each leading row.
    """
    m = M.shape[0]
    pivot_cols: list[int] = []
    row = 0

    for col in range(n_cols):
        if row >= m:
            break
        best = row + int(np.argmax(np.abs(M[row:, col])))
        if abs(M[best, col]) < tol:
            continue

        if best != row:
            M[[row, best]] = M[[best, row]]
        M[row] /= M[row, col]

        factors = M[:, col].copy()
        factors[row] = 0.0
        factors[np.abs(factors) < tol] = 0.0
        M -= np.outer(factors, M[row])

        pivot_cols.append(col)
        row += 1

    return M, pivot_cols


def left_inverse(A: ArrayLike) -> NDArray[np.floating[Any]] | None:
    """
    Left inverse L = (A^T A)^-1 A^T, so that L A = I_n.

    Exists iff A (m x n) has full column rank, which requires m >= n.

    Returns:
        L (n x m), or None if A^T A is singular or m < n
    """
    M = check_matrix(A, 'A')
    m, n = M.shape
    if m < n:
        return None
    gram_inv = inverse(M.T @ M)
    if gram_inv is None:
        return None
    return gram_inv @ M.T


def right_inverse(A: ArrayLike) -> NDArray[np.floating[Any]] | None:
    """
    Right inverse R = A^T (A A^T)^-1, so that A R = I_m.

    Exists iff A (m x n) has full row rank, which requires n >= m.

    Returns:
        R (n x m), or None if A A^T is singular or n < m
    """
    M = check_matrix(A, 'A')
    m, n = M.shape
    if n < m:
        return None
    gram_inv = inverse(M @ M.T)
    if gram_inv is None:
        return None
    return M.T @ gram_inv


def classify_invertibility(A: ArrayLike) -> InvertibilityReport:
    """
    Report which of the left, right and two-sided inverses of A exist.

    Each inverse that exists is checked against the identity.

    Raises:
        ValidationError: If A is empty, non-numeric or non-finite
        DimensionError: If A is not 2D
    """
    M = check_matrix(A, 'A')
    m, n = M.shape
    square = m == n

    left = left_inverse(M)
    right = right_inverse(M)
    two_sided = inverse(M) if square else None

    kind: InvertibilityKind = 'none'
    if left is not None and right is not None:
        kind = 'both'
    elif left is not None:
        kind = 'left-only'
    elif right is not None:
        kind = 'right-only'

    return InvertibilityReport(
        kind=kind,
        shape=(m, n),
        determinant=determinant(M) if square else None,
        inverse=two_sided,
        left_inverse=left,
        right_inverse=right,
        left_error=identity_error(left @ M) if left is not None else None,
        right_error=identity_error(M @ right) if right is not None else None,
        inverse_error=identity_error(M @ two_sided) if two_sided is not None else None,
    )
