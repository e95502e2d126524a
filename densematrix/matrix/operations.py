"""
Pure matrix operations.

Every function returns a new Matrix (or None when the operands do not
fit together) and leaves its arguments unchanged. The in-place
counterparts of add and subtract are Matrix.add and Matrix.subtract.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from densematrix.core.compute.tolerances import DEFAULT_PIVOT_TOLERANCE
from densematrix.matrix.matrix import Matrix, _check_matrix


def create(rows_or_content: int | ArrayLike, columns: int | None = None) -> Matrix:
    """
    Build a matrix.

    create(rows, columns) returns a zero-filled matrix; create(content)
    copies a rectangular table.
    """
    if columns is None:
        return Matrix.from_content(rows_or_content)
    return Matrix.zeros(rows_or_content, columns)


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    return Matrix.identity(n)


def add(left: Matrix, right: Matrix) -> Matrix | None:
    """left + right as a new matrix, or None if shapes differ."""
    result = _check_matrix(left, 'left').copy()
    if not result.add(right):
        return None
    return result


def subtract(left: Matrix, right: Matrix) -> Matrix | None:
    """left - right as a new matrix, or None if shapes differ."""
    result = _check_matrix(left, 'left').copy()
    if not result.subtract(right):
        return None
    return result


def multiply(left: Matrix, right: Matrix) -> Matrix | None:
    """Matrix product left · right, or None if left.columns != right.rows."""
    return _check_matrix(left, 'left').multiply(right)


def scale(matrix: Matrix, factor: float) -> Matrix:
    """matrix with every cell multiplied by factor."""
    return _check_matrix(matrix, 'matrix').scale(factor)


def transpose(matrix: Matrix) -> Matrix:
    return _check_matrix(matrix, 'matrix').transpose()


def invert(
    matrix: Matrix,
    *,
    pivot_tol: float = DEFAULT_PIVOT_TOLERANCE,
) -> Matrix | None:
    """
    Inverse by Gauss-Jordan elimination.

    None for a non-square matrix or when a pivot with |pivot| <= pivot_tol
    is met. See Matrix.invert.
    """
    return _check_matrix(matrix, 'matrix').invert(pivot_tol=pivot_tol)
