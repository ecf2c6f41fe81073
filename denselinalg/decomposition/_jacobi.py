"""
Classical Jacobi eigenvalue iteration for real symmetric matrices.

Shared by spectral_decomposition (which validates symmetry first) and svd
(which feeds it A^T A, symmetric by construction). Each step annihilates
the largest off-diagonal entry with one plane rotation.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from denselinalg.core.compute.matrix import identity
from denselinalg.core.exceptions import ConvergenceError


@dataclass(frozen=True)
class JacobiOutput:
    """Sorted eigenpairs plus iteration diagnostics."""
    values: NDArray[np.floating[Any]]
    vectors: NDArray[np.floating[Any]]
    iterations: int
    converged: bool
    off_diagonal: float


def _largest_off_diagonal(W: NDArray[np.floating[Any]]) -> tuple[int, int, float]:
    """Position (p, q), p < q, and magnitude of the largest |W[p, q]|."""
    n = W.shape[0]
    if n < 2:
        return 0, 0, 0.0
    upper = np.abs(np.triu(W, k=1))
    p, q = divmod(int(np.argmax(upper)), n)
    return p, q, float(upper[p, q])


def _rotate(
    W: NDArray[np.floating[Any]],
    V: NDArray[np.floating[Any]],
    p: int,
    q: int,
    c: float,
    s: float,
) -> None:
    """Apply W <- J W J^T and V <- V J^T for the rotation J in plane (p, q)."""
    row_p = W[p, :].copy()
    row_q = W[q, :].copy()
    W[p, :] = c * row_p + s * row_q
    W[q, :] = -s * row_p + c * row_q

    col_p = W[:, p].copy()
    col_q = W[:, q].copy()
    W[:, p] = c * col_p + s * col_q
    W[:, q] = -s * col_p + c * col_q

    # The rotation zeroes W[p, q] exactly; drop the rounding residue.
    W[p, q] = 0.0
    W[q, p] = 0.0

    vec_p = V[:, p].copy()
    vec_q = V[:, q].copy()
    V[:, p] = c * vec_p + s * vec_q
    V[:, q] = -s * vec_p + c * vec_q


def jacobi_eigen(
    S: NDArray[np.floating[Any]],
    *,
    tol: float,
    max_iterations: int,
    strict: bool = False,
) -> JacobiOutput:
    """
    Eigendecomposition of a symmetric matrix by Jacobi rotations.

    Repeatedly picks the off-diagonal pair (p, q) with the largest |S[p, q]|
    and stops once it falls below tol. The rotation angle is pi/4 when the
    two diagonal entries agree to within tol, otherwise
    0.5 * atan2(2 S[p, q], S[p, p] - S[q, q]).

    Eigenvalues are returned in descending order with the eigenvector
    columns permuted to match; equal eigenvalues keep their diagonal order.

    Args:
        S: Symmetric matrix (n x n); not modified
        tol: Convergence threshold on the largest off-diagonal magnitude
        max_iterations: Maximum number of rotations
        strict: Raise instead of warning when the budget runs out

    Returns:
        JacobiOutput with eigenvalues, eigenvectors (as columns), the number
        of rotations applied and whether the threshold was reached

    Raises:
        ConvergenceError: If strict and the budget runs out before convergence
    """
    W = np.array(S, dtype=np.float64, copy=True)
    V = identity(W.shape[0])

    iterations = 0
    p, q, off = _largest_off_diagonal(W)
    while off >= tol and iterations < max_iterations:
        diff = W[p, p] - W[q, q]
        if abs(diff) < tol:
            theta = math.pi / 4
        else:
            theta = 0.5 * math.atan2(2.0 * W[p, q], diff)
        _rotate(W, V, p, q, math.cos(theta), math.sin(theta))

        iterations += 1
        p, q, off = _largest_off_diagonal(W)

    converged = off < tol
    if not converged:
        message = (
            f"Jacobi eigenvalue iteration did not converge after {iterations} "
            f"rotations: largest off-diagonal entry {off:.3e} >= {tol:.1e}"
        )
        if strict:
            raise ConvergenceError(
                message,
                iterations=iterations,
                final_change=off,
                reason='max_iterations',
                threshold=tol,
            )
        warnings.warn(message, RuntimeWarning, stacklevel=3)

    values = np.diag(W).copy()
    order = np.argsort(-values, kind='stable')
    return JacobiOutput(
        values=values[order],
        vectors=V[:, order],
        iterations=iterations,
        converged=converged,
        off_diagonal=off,
    )
