"""
denselinalg: dense linear-algebra kernels for textbook-scale matrices.

Factorizations (LU with partial pivoting, modified Gram-Schmidt QR,
Cholesky, Jacobi eigendecomposition, SVD) and the operations built on
them: determinant, inverse, linear solves and reconstruction-error
diagnostics. Matrices are float64 numpy arrays; results are immutable.

Submodules:
    decomposition: Factorizations, derived operations and diagnostics
    systems: General m x n linear systems and one-sided inverses
    core: Exceptions, validation, tolerances
"""

__version__ = "0.1.0"

from denselinalg.core.exceptions import (
    DenseLinalgError,
    ValidationError,
    DimensionError,
    NotSymmetricError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceError,
)
from denselinalg.decomposition import (
    LUResult,
    QRResult,
    CholeskyResult,
    SpectralResult,
    SVDResult,
    lu,
    determinant,
    inverse,
    solve_lu,
    qr,
    cholesky,
    solve_cholesky,
    spectral_decomposition,
    svd,
    svd_reconstruct,
    lu_reconstruction_error,
    qr_reconstruction_error,
    cholesky_reconstruction_error,
    spectral_reconstruction_error,
    svd_reconstruction_error,
    orthogonality_error,
    identity_error,
    is_positive_definite,
)
from denselinalg.systems import (
    LinearSystemSolution,
    InvertibilityReport,
    solve_general,
    left_inverse,
    right_inverse,
    classify_invertibility,
)

__all__ = [
    "__version__",
    # Exceptions
    "DenseLinalgError",
    "ValidationError",
    "DimensionError",
    "NotSymmetricError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
    # Result types
    "LUResult",
    "QRResult",
    "CholeskyResult",
    "SpectralResult",
    "SVDResult",
    "LinearSystemSolution",
    "InvertibilityReport",
    # Factorizations and derived operations
    "lu",
    "determinant",
    "inverse",
    "solve_lu",
    "qr",
    "cholesky",
    "solve_cholesky",
    "spectral_decomposition",
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
    # Linear systems
    "solve_general",
    "left_inverse",
    "right_inverse",
    "classify_invertibility",
]
