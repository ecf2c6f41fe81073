"""
Forward and back substitution for triangular systems.

Both accept a right-hand side of shape (n,) or (n, k); the inner products
are vectorized over the already-solved entries, the outer loop runs over
rows. Callers are responsible for checking pivots before calling.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def forward_substitution(
    L: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    *,
    unit_diagonal: bool = False,
) -> NDArray[np.floating[Any]]:
    """Solve L y = b for lower triangular L."""
    n = L.shape[0]
    y = np.zeros_like(b, dtype=np.float64)
    for i in range(n):
        y[i] = b[i] - L[i, :i] @ y[:i]
        if not unit_diagonal:
            y[i] = y[i] / L[i, i]
    return y


def back_substitution(
    U: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Solve U x = y for upper triangular U."""
    n = U.shape[0]
    x = np.zeros_like(y, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        x[i] = (y[i] - U[i, i + 1:] @ x[i + 1:]) / U[i, i]
    return x
