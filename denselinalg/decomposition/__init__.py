"""
Dense matrix factorizations.

Public API:
    lu(A) -> LUResult, with determinant, inverse, solve_lu
    qr(A) -> QRResult
    cholesky(A) -> CholeskyResult, with solve_cholesky
    spectral_decomposition(A) -> SpectralResult
    svd(A) -> SVDResult, with svd_reconstruct

Every factorization validates its input, works on a private float64 copy
and returns a frozen result whose arrays are read-only. The diagnostics
functions measure how well a result reproduces its input.

Example:
    >>> from denselinalg.decomposition import lu, determinant, solve_lu
    >>> result = lu([[4.0, 3.0], [6.0, 3.0]])
    >>> determinant(result)
    -6.0
    >>> solve_lu(result, [7.0, 9.0])
    array([1., 1.])
"""

from denselinalg.decomposition.lu import (
    LUResult,
    lu,
    determinant,
    inverse,
    solve_lu,
)
from denselinalg.decomposition.qr import QRResult, qr
from denselinalg.decomposition.cholesky import CholeskyResult, cholesky, solve_cholesky
from denselinalg.decomposition.spectral import SpectralResult, spectral_decomposition
from denselinalg.decomposition.svd import SVDResult, svd, svd_reconstruct
from denselinalg.decomposition.diagnostics import (
    lu_reconstruction_error,
    qr_reconstruction_error,
    cholesky_reconstruction_error,
    spectral_reconstruction_error,
    svd_reconstruction_error,
    orthogonality_error,
    identity_error,
    is_positive_definite,
)

__all__ = [
    # LU
    "LUResult",
    "lu",
    "determinant",
    "inverse",
    "solve_lu",
    # QR
    "QRResult",
    "qr",
    # Cholesky
    "CholeskyResult",
    "cholesky",
    "solve_cholesky",
    # Spectral
    "SpectralResult",
    "spectral_decomposition",
    # SVD
    "SVDResult",
    "svd",
    "svd_reconstruct",
    # Diagnostics
    "lu_reconstruction_error",
    "qr_reconstruction_error",
    "cholesky_reconstruction_error",
    "spectral_reconstruction_error",
    "svd_reconstruction_error",
    "orthogonality_error",
    "identity_error",
    "is_positive_definite",
]
