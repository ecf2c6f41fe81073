"""
Linear systems of any shape.

Public API:
    solve_general(A, b) -> LinearSystemSolution
    left_inverse(A), right_inverse(A)
    classify_invertibility(A) -> InvertibilityReport

Square, well-posed systems are better served by solve_lu or
solve_cholesky from denselinalg.decomposition; solve_general also covers
inconsistent and underdetermined systems.
"""

from denselinalg.systems.solution import (
    InvertibilityReport,
    LinearSystemSolution,
)
from denselinalg.systems.solvers import (
    classify_invertibility,
    left_inverse,
    right_inverse,
    solve_general,
)

__all__ = [
    "solve_general",
    "left_inverse",
    "right_inverse",
    "classify_invertibility",
    "LinearSystemSolution",
    "InvertibilityReport",
]
