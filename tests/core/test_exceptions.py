"""
Tests for the denselinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via DenseLinalgError)
    - Diagnostic attributes on NotSymmetricError, SingularMatrixError,
      NotPositiveDefiniteError, ConvergenceError
    - Default attribute values (None for optional attributes)
    - Exceptions raised by the public API carry those attributes
"""

import numpy as np
import pytest

from denselinalg import (
    cholesky,
    lu,
    solve_lu,
    spectral_decomposition,
)
from denselinalg.core.exceptions import (
    ConvergenceError,
    DenseLinalgError,
    DimensionError,
    NotPositiveDefiniteError,
    NotSymmetricError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via DenseLinalgError."""

    @pytest.mark.parametrize("exc", [
        ValidationError("bad input"),
        DimensionError("wrong shape"),
        NotSymmetricError("asymmetric"),
        NumericalError("computation failed"),
        SingularMatrixError("singular"),
        NotPositiveDefiniteError("not PD"),
        ConvergenceError("did not converge", iterations=100),
    ])
    def test_is_dense_linalg_error(self, exc):
        assert isinstance(exc, DenseLinalgError)

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_not_symmetric_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise NotSymmetricError("asymmetric")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_not_positive_definite_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NotPositiveDefiniteError("not PD")

    def test_convergence_error_is_not_numerical_error(self):
        """ConvergenceError inherits from DenseLinalgError, not NumericalError."""
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, NumericalError)

    def test_dimension_error_is_not_numerical_error(self):
        assert not isinstance(DimensionError("x"), NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestNotSymmetricError:

    def test_all_attributes(self):
        err = NotSymmetricError(
            "A is not symmetric",
            matrix_name="A",
            max_asymmetry=0.5,
            tolerance=1e-12,
        )
        assert str(err) == "A is not symmetric"
        assert err.matrix_name == "A"
        assert err.max_asymmetry == 0.5
        assert err.tolerance == 1e-12

    def test_defaults_are_none(self):
        err = NotSymmetricError("asymmetric")
        assert err.matrix_name is None
        assert err.max_asymmetry is None
        assert err.tolerance is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "U is singular",
            matrix_name="U",
            condition_number=1e18,
            rank=2,
            expected_rank=3,
            pivot_index=2,
        )
        assert str(err) == "U is singular"
        assert err.matrix_name == "U"
        assert err.condition_number == 1e18
        assert err.rank == 2
        assert err.expected_rank == 3
        assert err.pivot_index == 2

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None
        assert err.pivot_index is None


class TestNotPositiveDefiniteError:

    def test_all_attributes(self):
        err = NotPositiveDefiniteError(
            "Cholesky failed",
            matrix_name="A",
            leading_minor=1,
        )
        assert err.matrix_name == "A"
        assert err.leading_minor == 1

    def test_defaults_are_none(self):
        err = NotPositiveDefiniteError("not PD")
        assert err.matrix_name is None
        assert err.leading_minor is None


class TestConvergenceError:

    def test_all_attributes(self):
        err = ConvergenceError(
            "Jacobi did not converge",
            iterations=500,
            final_change=1e-4,
            reason="max_iterations",
            threshold=1e-14,
        )
        assert str(err) == "Jacobi did not converge"
        assert err.iterations == 500
        assert err.final_change == 1e-4
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-14

    def test_required_iterations(self):
        """iterations is required (positional)."""
        err = ConvergenceError("failed", 42)
        assert err.iterations == 42

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=10)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None


# ═══════════════════════════════════════════════════════════════════════
# Raised by the public API
# ═══════════════════════════════════════════════════════════════════════


class TestRaisedDiagnostics:
    """Errors raised by the factorizations carry their diagnostics."""

    def test_not_symmetric_reports_asymmetry(self):
        with pytest.raises(NotSymmetricError) as exc_info:
            spectral_decomposition([[1.0, 2.0], [0.0, 1.0]])
        assert exc_info.value.max_asymmetry == pytest.approx(2.0)
        assert exc_info.value.matrix_name == "A"

    def test_not_positive_definite_reports_minor(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky([[1.0, 2.0], [2.0, 1.0]])
        assert exc_info.value.leading_minor == 1

    def test_singular_solve_reports_pivot(self):
        result = lu([[1.0, 2.0], [2.0, 4.0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            solve_lu(result, [1.0, 2.0])
        assert exc_info.value.pivot_index == 1
        assert exc_info.value.expected_rank == 2

    def test_convergence_error_reports_iterations(self):
        with pytest.raises(ConvergenceError) as exc_info:
            spectral_decomposition(
                np.array([[2.0, 1.0], [1.0, 2.0]]),
                max_iterations=0,
                strict=True,
            )
        assert exc_info.value.iterations == 0
        assert exc_info.value.reason == "max_iterations"
        assert exc_info.value.final_change == pytest.approx(1.0)
