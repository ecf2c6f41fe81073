"""
Reconstruction-error diagnostics for the factorizations.

Each function recomputes the product implied by a factorization and
returns the Frobenius norm of the residual. They are pure: calling one
twice on the same result gives the same value.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from denselinalg.core.compute.matrix import frobenius_norm, identity
from denselinalg.core.compute.tolerances import SYMMETRY_TOLERANCE, VERIFICATION_TOLERANCE
from denselinalg.core.exceptions import NotPositiveDefiniteError
from denselinalg.core.validation import (
    check_consistent_shape,
    check_matrix,
    check_square,
)
from denselinalg.decomposition.cholesky import CholeskyResult, cholesky
from denselinalg.decomposition.lu import LUResult
from denselinalg.decomposition.qr import QRResult
from denselinalg.decomposition.spectral import SpectralResult
from denselinalg.decomposition.svd import SVDResult, svd_reconstruct


def _original(A: ArrayLike, shape: tuple[int, ...]) -> NDArray[np.floating[Any]]:
    M = check_matrix(A, 'A')
    check_consistent_shape(M, shape, 'A')
    return M


def lu_reconstruction_error(A: ArrayLike, result: LUResult) -> float:
    """||P A - L U||_F."""
    M = _original(A, result.U.shape)
    return frobenius_norm(result.P @ M - result.L @ result.U)


def qr_reconstruction_error(A: ArrayLike, result: QRResult) -> float:
    """||A - Q R||_F."""
    M = _original(A, result.Q.shape)
    return frobenius_norm(M - result.Q @ result.R)


def cholesky_reconstruction_error(A: ArrayLike, result: CholeskyResult) -> float:
    """||A - L L^T||_F."""
    M = _original(A, result.L.shape)
    return frobenius_norm(M - result.L @ result.L.T)


def spectral_reconstruction_error(A: ArrayLike, result: SpectralResult) -> float:
    """||A - Q diag(eigenvalues) Q^T||_F."""
    M = _original(A, result.Q.shape)
    return frobenius_norm(M - (result.Q * result.eigenvalues) @ result.Q.T)


def svd_reconstruction_error(A: ArrayLike, result: SVDResult) -> float:
    """||A - U diag(S) V_r^T||_F."""
    M = _original(A, (result.U.shape[0], result.V.shape[0]))
    return frobenius_norm(M - svd_reconstruct(result))


def orthogonality_error(Q: ArrayLike) -> float:
    """||Q^T Q - I||_F, zero when Q has orthonormal columns."""
    M = check_matrix(Q, 'Q')
    return frobenius_norm(M.T @ M - identity(M.shape[1]))


def identity_error(M: ArrayLike) -> float:
    """||M - I||_F for a square matrix, e.g. A @ inverse(A)."""
    arr = check_matrix(M, 'M')
    check_square(arr, 'M')
    return frobenius_norm(arr - identity(arr.shape[0]))


def is_positive_definite(
    A: ArrayLike,
    *,
    tol: float = VERIFICATION_TOLERANCE,
) -> bool:
    """
    Check whether Cholesky is trustworthy for A.

    True when A is square, symmetric within SYMMETRY_TOLERANCE, Cholesky
    succeeds and its reconstruction error is below tol * max(1, ||A||_F).

    Raises:
        ValidationError: If A is empty, non-numeric or non-finite
        DimensionError: If A is not 2D
    """
    M = check_matrix(A, 'A')
    n_rows, n_cols = M.shape
    if n_rows != n_cols:
        return False
    if float(np.max(np.abs(M - M.T))) > SYMMETRY_TOLERANCE:
        return False
    try:
        chol = cholesky(M)
    except NotPositiveDefiniteError:
        return False
    scale = max(1.0, frobenius_norm(M))
    return cholesky_reconstruction_error(M, chol) < tol * scale
