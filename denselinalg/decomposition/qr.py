"""
QR decomposition by modified Gram-Schmidt.

Computes A = Q R where Q (m x n) has orthonormal columns and R (n x n) is
upper triangular. Modified Gram-Schmidt is used instead of Householder
reflections; it loses orthogonality on nearly rank-deficient input, which
is acceptable for textbook-sized matrices.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from denselinalg.core.compute.matrix import freeze
from denselinalg.core.compute.tolerances import ZERO_TOLERANCE
from denselinalg.core.validation import check_matrix


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Matrix with orthonormal columns (m x n)
        R: Upper triangular matrix (n x n)
        rank: Number of columns whose residual norm reached tol
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int

    def __post_init__(self) -> None:
        freeze(self.Q)
        freeze(self.R)


def qr(A: ArrayLike, *, tol: float = ZERO_TOLERANCE) -> QRResult:
    """
    QR decomposition by modified Gram-Schmidt.

    Column j is orthogonalized against the already-normalized columns
    0..j-1 one at a time, the projection coefficients going into R[k, j],
    then normalized by its residual norm, which becomes R[j, j].

    A residual norm below tol means column j is (numerically) a linear
    combination of the earlier columns. It is then divided by 1 instead of
    its norm: R[j, j] is 1, Q[:, j] is the tiny residual, Q R still
    reproduces A, but Q[:, j] is not a unit vector. Such columns are left
    out of the reported rank and a RuntimeWarning names them.

    Args:
        A: Matrix to decompose (m x n), m >= n recommended
        tol: Residual norms below tol are treated as zero

    Returns:
        QRResult with Q, R and numerical rank

    Raises:
        ValidationError: If A is empty, non-numeric or non-finite
        DimensionError: If A is not 2D
    """
    Q = check_matrix(A, 'A')
    m, n = Q.shape
    R = np.zeros((n, n), dtype=np.float64)
    dependent: list[int] = []

    for j in range(n):
        for k in range(j):
            R[k, j] = Q[:, k] @ Q[:, j]
            Q[:, j] -= R[k, j] * Q[:, k]

        norm = float(np.sqrt(Q[:, j] @ Q[:, j]))
        if norm < tol:
            dependent.append(j)
            norm = 1.0
        R[j, j] = norm
        Q[:, j] /= norm

    if dependent:
        warnings.warn(
            f"QR: columns {dependent} are numerically linearly dependent on "
            f"earlier columns (residual norm < {tol:.1e}); the corresponding "
            f"columns of Q are not normalized.",
            RuntimeWarning,
            stacklevel=2,
        )

    return QRResult(Q=Q, R=R, rank=n - len(dependent))
