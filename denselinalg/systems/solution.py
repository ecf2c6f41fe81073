"""
Linear-system solution types.

Contains the frozen outcome of solve_general() and of the invertibility
classification.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from denselinalg.core.exceptions import DimensionError
from denselinalg.core.validation import check_array, check_1d


SolutionKind = Literal['none', 'unique', 'infinite']
InvertibilityKind = Literal['none', 'left-only', 'right-only', 'both']


@dataclass(frozen=True)
class LinearSystemSolution:
    """
    Outcome of solving A x = b by reduced row echelon form.

    Attributes:
        kind: 'none' (inconsistent or invalid system), 'unique' or 'infinite'
        x: The solution for 'unique'; the particular solution for 'infinite'
        free_indices: Indices of free variables ('infinite' only)
        basis: Null-space basis, one row per free variable; row i has a 1
            at free_indices[i] ('infinite' only)
        residual: ||A x - b||_2 of x, or None when there is no solution
        message: Explanation for 'none'
    """
    kind: SolutionKind
    x: NDArray[np.floating[Any]] | None = None
    free_indices: tuple[int, ...] = field(default_factory=tuple)
    basis: NDArray[np.floating[Any]] | None = None
    residual: float | None = None
    message: str | None = None

    @property
    def has_solution(self) -> bool:
        return self.kind != 'none'

    @property
    def particular(self) -> NDArray[np.floating[Any]] | None:
        """Alias of x for parametric solutions."""
        return self.x

    @property
    def n_free(self) -> int:
        return len(self.free_indices)

    def evaluate(self, t: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Point of the solution set for free-variable values t.

        Returns x + sum_i t[i] * basis[i]. For a unique solution t must be
        empty.

        Raises:
            ValueError: If the system has no solution
            DimensionError: If len(t) differs from the number of free variables
        """
        if self.x is None:
            raise ValueError(f"System has no solution: {self.message}")
        params = check_array(t, 't')
        check_1d(params, 't')
        if params.shape[0] != self.n_free:
            raise DimensionError(
                f"t: expected {self.n_free} free-variable values, got {params.shape[0]}"
            )
        if self.basis is None or self.n_free == 0:
            return self.x.copy()
        return self.x + params @ self.basis

    def __repr__(self) -> str:
        if self.kind == 'none':
            return f"LinearSystemSolution(kind='none', message={self.message!r})"
        return (
            f"LinearSystemSolution(kind={self.kind!r}, n_free={self.n_free}, "
            f"residual={self.residual:.3e})"
        )


@dataclass(frozen=True)
class InvertibilityReport:
    """
    Which inverses of an m x n matrix exist.

    Attributes:
        kind: 'both' (square and invertible), 'left-only' (full column rank),
            'right-only' (full row rank) or 'none'
        shape: (m, n)
        determinant: det(A) for square A, None otherwise
        inverse: Two-sided inverse, if A is square and invertible
        left_inverse: L (n x m) with L A = I_n, if it exists
        right_inverse: R (n x m) with A R = I_m, if it exists
        left_error: ||L A - I_n||_F when L exists
        right_error: ||A R - I_m||_F when R exists
        inverse_error: ||A A^-1 - I||_F when the inverse exists
    """
    kind: InvertibilityKind
    shape: tuple[int, int]
    determinant: float | None = None
    inverse: NDArray[np.floating[Any]] | None = None
    left_inverse: NDArray[np.floating[Any]] | None = None
    right_inverse: NDArray[np.floating[Any]] | None = None
    left_error: float | None = None
    right_error: float | None = None
    inverse_error: float | None = None
