"""
Matrix helpers shared by the factorization kernels.

Matrices are 2D float64 numpy arrays; vectors are 1D float64 arrays.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def identity(n: int) -> NDArray[np.floating[Any]]:
    """n x n identity matrix."""
    return np.eye(n, dtype=np.float64)


def permutation_matrix(pivot: NDArray[np.integer[Any]]) -> NDArray[np.floating[Any]]:
    """
    Permutation matrix P from a pivot array.

    pivot[k] is the row of the original matrix that ends up at position k,
    so (P @ A)[k] == A[pivot[k]].
    """
    n = len(pivot)
    P = np.zeros((n, n), dtype=np.float64)
    P[np.arange(n), pivot] = 1.0
    return P


def permutation_sign(pivot: NDArray[np.integer[Any]]) -> float:
    """Sign of a permutation: (-1) ** (number of inversions)."""
    inversions = 0
    n = len(pivot)
    for i in range(n):
        inversions += int(np.count_nonzero(pivot[i + 1:] < pivot[i]))
    return 1.0 if inversions % 2 == 0 else -1.0


def frobenius_norm(M: NDArray[np.floating[Any]]) -> float:
    """Square root of the sum of squared entries."""
    return float(np.sqrt(np.sum(np.square(M))))


def freeze(M: NDArray[Any]) -> NDArray[Any]:
    """Mark an array read-only and return it."""
    M.flags.writeable = False
    return M
