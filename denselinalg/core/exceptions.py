"""
Exception hierarchy for denselinalg.

All exceptions inherit from DenseLinalgError so callers can catch any
library-specific failure in one place, or match on the specific class
(DimensionError, NotSymmetricError, NotPositiveDefiniteError,
SingularMatrixError, ConvergenceError) to handle one failure kind.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseLinalgError(Exception):
    """Base exception for all denselinalg errors."""
    pass


class ValidationError(DenseLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (non-numeric data, NaN/Inf entries, empty matrices).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised for non-square input to LU, determinant, inverse, Cholesky and
    spectral decomposition, and for operands whose shapes do not agree
    (right-hand side length, matrix vs. factorization shape).
    """
    pass


class NotSymmetricError(ValidationError):
    """
    Matrix is not symmetric.

    Raised by spectral decomposition when some |A[i, j] - A[j, i]| exceeds
    the symmetry tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        max_asymmetry: Largest |A[i, j] - A[j, i]| found
        tolerance: Symmetry tolerance that was exceeded
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        max_asymmetry: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.max_asymmetry = max_asymmetry
        self.tolerance = tolerance


class NumericalError(DenseLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a solve requires invertibility but a pivot of the
    factorization is numerically zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number; inf when a pivot is
            numerically zero
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically n)
        pivot_index: Index of the first zero pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
        self.pivot_index = pivot_index


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised by Cholesky factorization when a diagonal radicand is <= 0 or a
    divisor L[j, j] is numerically zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        leading_minor: Index of the diagonal step at which the test failed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        leading_minor: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.leading_minor = leading_minor


class ConvergenceError(DenseLinalgError):
    """
    Iterative algorithm failed to converge.

    Raised when the Jacobi eigenvalue iteration exhausts its rotation budget
    before the largest off-diagonal entry falls below the threshold.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final off-diagonal magnitude
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
