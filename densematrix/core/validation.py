"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from densematrix.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-real dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64)


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


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Raises:
        ValidationError: If either dimension is zero
    """
    n_rows, n_columns = array.shape
    if n_rows < 1 or n_columns < 1:
        raise ValidationError(
            f"{name}: needs at least 1 row and 1 column, got shape {array.shape}"
        )


def _is_row(row: Any) -> bool:
    """A row is a sequence or a 1D array."""
    if isinstance(row, np.ndarray):
        return row.ndim == 1
    return isinstance(row, Sequence)


def check_rectangular(table: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    NumPy arrays are rectangular by construction and pass unchecked.
    Rows may be sequences or 1D arrays, in any mix.
    The first ragged row is named in the error so the caller can find it.

    Args:
        table: Sequence of row sequences
        name: Parameter name for error messages

    Raises:
        DimensionError: If row lengths differ
    """
    if isinstance(table, np.ndarray) or not isinstance(table, Sequence):
        return
    if len(table) == 0 or not _is_row(table[0]):
        return

    expected = len(table[0])
    for i, row in enumerate(table):
        if not _is_row(row) or len(row) != expected:
            actual = len(row) if _is_row(row) else type(row).__name__
            raise DimensionError(
                f"{name}: ragged table, row 0 has {expected} columns "
                f"but row {i} has {actual}"
            )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    bool is rejected even though it subclasses int.

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_non_negative(value: float, name: str) -> float:
    """
    Verify a real scalar is finite and >= 0.

    Raises:
        ValidationError: If value is negative, NaN or infinite
    """
    value = float(value)
    if not np.isfinite(value) or value < 0.0:
        raise ValidationError(f"{name}: must be a finite value >= 0, got {value}")
    return value
