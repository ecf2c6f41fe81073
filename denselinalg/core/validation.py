"""
Input validation utilities for denselinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except conversion of array-likes to float64)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from denselinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    NotSymmetricError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a fresh float64 numpy array.

    Accepts any array-like and converts it to a new C-contiguous float64
    array, so the result never shares memory with the caller's data.
    Rejects inputs that result in object dtype (ragged rows, mixed types)
    or a non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64, owned by the caller of this function

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported, expected real data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return np.array(result, dtype=np.float64, order='C', copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every dimension of the array has at least one entry.

    Raises:
        ValidationError: If any dimension has length zero
    """
    if array.size == 0:
        raise ValidationError(
            f"{name}: empty array with shape {array.shape}, "
            f"expected at least one row and one column"
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If the row and column counts differ
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {array.shape}"
        )


def check_symmetric(
    array: NDArray[np.floating[Any]],
    tol: float,
    name: str,
) -> None:
    """
    Verify a square array is symmetric within an absolute tolerance.

    Args:
        array: Square 2D array to check
        tol: Largest accepted |A[i, j] - A[j, i]|
        name: Parameter name for error messages

    Raises:
        NotSymmetricError: If any entry pair differs by more than tol
    """
    asymmetry = np.abs(array - array.T)
    max_asymmetry = float(asymmetry.max())
    if max_asymmetry > tol:
        i, j = np.unravel_index(int(np.argmax(asymmetry)), asymmetry.shape)
        raise NotSymmetricError(
            f"{name}: matrix must be symmetric; |A[{i}, {j}] - A[{j}, {i}]| = "
            f"{max_asymmetry:.3e} exceeds tolerance {tol:.1e}",
            matrix_name=name,
            max_asymmetry=max_asymmetry,
            tolerance=tol,
        )


def check_matrix(A: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Run the standard matrix checks and return a validated working copy.

    Converts to float64, then verifies the result is 2D, non-empty and
    finite. This is the boundary check used by every public entry point.

    Raises:
        ValidationError: If input is non-numeric, empty or non-finite
        DimensionError: If input is not 2D
    """
    arr = check_array(A, name)
    check_2d(arr, name)
    check_nonempty(arr, name)
    check_finite(arr, name)
    return arr


def check_rhs(
    b: ArrayLike,
    n_rows: int,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate a right-hand side for an n_rows x n_rows system.

    Accepts a vector of shape (n_rows,) or a matrix of shape (n_rows, k).

    Raises:
        ValidationError: If input is non-numeric or non-finite
        DimensionError: If the leading dimension is not n_rows
    """
    arr = check_array(b, name)
    if arr.ndim not in (1, 2):
        raise DimensionError(
            f"{name}: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}"
        )
    if arr.shape[0] != n_rows:
        raise DimensionError(
            f"{name}: expected leading dimension {n_rows}, got shape {arr.shape}"
        )
    check_finite(arr, name)
    return arr


def check_consistent_shape(
    array: NDArray[np.floating[Any]],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify an array has exactly the expected shape.

    Raises:
        DimensionError: If the shapes differ
    """
    if array.shape != tuple(shape):
        raise DimensionError(
            f"{name}: expected shape {tuple(shape)}, got {array.shape}"
        )
