"""
Tests for solve_general: classification of A x = b into no solution,
a unique solution or a parametric family.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from numpy.testing import assert_allclose

from denselinalg import DimensionError, ValidationError, solve_general


class TestUnique:

    def test_square(self):
        result = solve_general([[2.0, 1.0], [1.0, 3.0]], [3.0, 5.0])
        assert result.kind == 'unique'
        assert_allclose(result.x, [0.8, 1.4])
        assert result.residual < 1e-12
        assert result.n_free == 0
        assert result.basis is None

    def test_random_square(self, square_matrix, rng):
        x_true = rng.standard_normal(5)
        result = solve_general(square_matrix, square_matrix @ x_true)
        assert result.kind == 'unique'
        assert_allclose(result.x, x_true, rtol=1e-9, atol=1e-12)

    def test_overdetermined_consistent(self):
        A = [[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]
        result = solve_general(A, [1.0, 2.0, 3.0])
        assert result.kind == 'unique'
        assert_allclose(result.x, [1.0, 2.0])

    def test_needs_row_swap(self):
        result = solve_general([[0.0, 1.0], [1.0, 0.0]], [2.0, 3.0])
        assert result.kind == 'unique'
        assert_allclose(result.x, [3.0, 2.0])

    def test_evaluate_without_parameters(self):
        result = solve_general([[1.0, 0.0], [0.0, 2.0]], [1.0, 4.0])
        assert_allclose(result.evaluate([]), [1.0, 2.0])


class TestInfinite:
    """x + 2y + 3z = 6 (twice): one pivot, two free variables."""

    A = [[1.0, 2.0, 3.0], [2.0, 4.0, 6.0]]
    b = [6.0, 12.0]

    def test_classification(self):
        result = solve_general(self.A, self.b)
        assert result.kind == 'infinite'
        assert result.has_solution
        assert result.free_indices == (1, 2)
        assert result.n_free == 2

    def test_particular_solution(self):
        result = solve_general(self.A, self.b)
        assert_allclose(result.particular, [6.0, 0.0, 0.0])
        assert result.residual < 1e-12

    def test_basis_spans_null_space(self):
        result = solve_general(self.A, self.b)
        assert_allclose(result.basis, [[-2.0, 1.0, 0.0], [-3.0, 0.0, 1.0]])
        assert_allclose(np.asarray(self.A) @ result.basis.T, np.zeros((2, 2)), atol=1e-12)

    def test_evaluate(self):
        result = solve_general(self.A, self.b)
        assert_allclose(result.evaluate([1.0, 1.0]), [1.0, 1.0, 1.0])

    @pytest.mark.parametrize("t", [[0.0, 0.0], [2.5, -1.0], [-7.0, 3.0]])
    def test_every_point_solves(self, t):
        result = solve_general(self.A, self.b)
        assert_allclose(np.asarray(self.A) @ result.evaluate(t), self.b, atol=1e-12)

    def test_evaluate_wrong_length_raises(self):
        result = solve_general(self.A, self.b)
        with pytest.raises(DimensionError):
            result.evaluate([1.0])

    def test_underdetermined(self):
        result = solve_general([[1.0, 1.0, 0.0], [0.0, 1.0, 1.0]], [2.0, 3.0])
        assert result.kind == 'infinite'
        assert result.free_indices == (2,)
        assert_allclose(result.x, [-1.0, 3.0, 0.0])


class TestNoSolution:

    def test_inconsistent(self):
        result = solve_general([[1.0, 1.0], [1.0, 1.0]], [1.0, 2.0])
        assert result.kind == 'none'
        assert not result.has_solution
        assert result.message == 'No solution (inconsistent system).'
        assert result.x is None
        assert result.residual is None

    def test_empty_matrix(self):
        result = solve_general([], [])
        assert result.kind == 'none'
        assert result.message == 'Empty matrix.'

    def test_wrong_rhs_length(self):
        result = solve_general([[1.0, 0.0], [0.0, 1.0]], [1.0, 2.0, 3.0])
        assert result.kind == 'none'
        assert result.message == 'Length of b (3) must equal number of rows (2).'

    def test_evaluate_raises(self):
        result = solve_general([[1.0, 1.0], [1.0, 1.0]], [1.0, 2.0])
        with pytest.raises(ValueError, match="no solution"):
            result.evaluate([])

    def test_repr(self):
        result = solve_general([[1.0, 1.0], [1.0, 1.0]], [1.0, 2.0])
        assert "kind='none'" in repr(result)


class TestTolerance:

    def test_tiny_pivot_treated_as_zero(self):
        """1e-12 is below the default threshold, so the second row is inconsistent."""
        A = [[1.0, 0.0], [0.0, 1e-12]]
        assert solve_general(A, [1.0, 1.0]).kind == 'none'
        result = solve_general(A, [1.0, 1.0], tol=1e-14)
        assert result.kind == 'unique'
        assert_allclose(result.x, [1.0, 1e12])


class TestValidation:

    def test_nan_raises(self):
        with pytest.raises(ValidationError):
            solve_general([[1.0, np.nan], [0.0, 1.0]], [1.0, 1.0])

    def test_matrix_rhs_raises(self):
        with pytest.raises(DimensionError):
            solve_general(np.eye(2), np.ones((2, 1)))

    def test_frozen(self):
        result = solve_general(np.eye(2), [1.0, 1.0])
        with pytest.raises(FrozenInstanceError):
            result.kind = 'none'

    def test_does_not_mutate_inputs(self):
        A = np.array([[0.0, 1.0], [1.0, 0.0]])
        b = np.array([2.0, 3.0])
        solve_general(A, b)
        np.testing.assert_array_equal(A, [[0.0, 1.0], [1.0, 0.0]])
        np.testing.assert_array_equal(b, [2.0, 3.0])
